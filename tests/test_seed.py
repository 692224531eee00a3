from src.app.repositories.admin_repository import AdminRepository
from src.app.seed import SAMPLE_VIDEOS, seed_database
from src.app.utils.security import verify_password


def test_seed_creates_admin_and_catalogue(session, repo):
    summary = seed_database(session, "owner", "s3cret")
    assert summary == {"admin_created": True, "videos_created": len(SAMPLE_VIDEOS)}

    admin = AdminRepository(session).get_admin_by_username("owner")
    assert admin.password != "s3cret"
    assert verify_password("s3cret", admin.password)

    # sample counters are kept as given
    assert repo.admin_stats()["total_views"] == sum(row[3] for row in SAMPLE_VIDEOS)


def test_seed_is_idempotent(session, repo):
    seed_database(session, "owner", "s3cret")
    summary = seed_database(session, "owner", "other-password")
    assert summary == {"admin_created": False, "videos_created": 0}
    assert repo.count_all_videos() == len(SAMPLE_VIDEOS)


def test_seed_without_credentials_skips_admin(session):
    summary = seed_database(session, None, None)
    assert summary["admin_created"] is False
    assert AdminRepository(session).get_admin_by_username("owner") is None
