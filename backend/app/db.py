"""
Database engine and session helpers.

``DATABASE_URL`` selects the database (SQLite file by default). Routes get
a session per request through ``get_session``.
"""

import os
from typing import Iterator

from sqlalchemy import Engine, create_engine, event as sa_event
from sqlalchemy.orm import Session, sessionmaker

from .models import Base
from .models import birthday, church, event, resource  # noqa: F401


def build_engine(url: str) -> Engine:
    if not url.startswith("sqlite"):
        return create_engine(url, pool_pre_ping=True)

    engine = create_engine(url, connect_args={"check_same_thread": False})

    @sa_event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_connection, _):
        """Enable foreign key enforcement in SQLite."""
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


engine = build_engine(os.getenv("DATABASE_URL", "sqlite:///./calendar.db"))
SessionLocal = sessionmaker(bind=engine, expire_on_commit=False)


def create_tables() -> None:
    Base.metadata.create_all(bind=engine)


def get_session() -> Iterator[Session]:
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
