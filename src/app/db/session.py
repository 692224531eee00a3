# File location: src/app/db/session.py
import logging
from typing import Generator

from sqlmodel import Session, SQLModel, create_engine

from src.app.config.settings import DATABASE_URL


def build_engine(database_url: str = DATABASE_URL, **kwargs):
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args, **kwargs)


engine = build_engine()


def create_db_and_tables(bind=None) -> None:
    # Importing the package registers every table on SQLModel.metadata
    import src.app.models  # noqa: F401

    target = bind or engine
    SQLModel.metadata.create_all(target)
    logging.info("Database tables are ready.")


def get_db() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session
