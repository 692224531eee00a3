from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from src.app.db.session import create_db_and_tables, get_db
from src.app.main import app
from src.app.repositories.admin_repository import AdminRepository
from src.app.repositories.video_repository import VideoRepository
from src.app.utils.security import create_access_token, hash_password

TEST_SECRET = "test-signing-secret"
ADMIN_USERNAME = "curator"
ADMIN_PASSWORD = "correct-horse-battery"


@pytest.fixture(autouse=True)
def jwt_secret(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", TEST_SECRET)
    return TEST_SECRET


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_db_and_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def repo(session):
    return VideoRepository(session)


@pytest.fixture
def client(engine):
    def override_get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin(session):
    return AdminRepository(session).create_admin(ADMIN_USERNAME, hash_password(ADMIN_PASSWORD))


@pytest.fixture
def auth_headers(admin):
    token = create_access_token(admin.id, admin.username)
    return {"Authorization": f"Bearer {token}"}


def video_record(index: int, **overrides) -> dict:
    """A catalogue row with distinct counters and posting dates."""
    record = {
        "title": f"Video {index}",
        "description": f"Description for video {index}",
        "thumbnail_url": f"https://img.example.com/{index}.jpg",
        "video_url": f"https://cdn.example.com/{index}.mp4",
        "tags": ["sample", f"tag{index}"],
        "category": "Programming" if index % 2 else "Design",
        "views": (index * 37) % 101,
        "likes": (index * 13) % 29,
        "is_active": True,
        "date_posted": datetime(2024, 1, 1, tzinfo=timezone.utc) + timedelta(hours=index * 5 % 17, minutes=index),
    }
    record.update(overrides)
    return record


@pytest.fixture
def catalogue(repo):
    """12 active videos plus 2 inactive ones."""
    records = [video_record(i) for i in range(1, 13)]
    records += [
        video_record(13, is_active=False, views=5000, likes=900, category="Hidden"),
        video_record(14, is_active=False, views=4000, likes=800),
    ]
    repo.import_videos(records)
    return records
