"""
Shared pytest fixtures for model, service and API tests.

Uses an in-memory SQLite database so no Postgres or Redis instance is
needed. Sessions join an outer transaction in savepoint mode: services may
commit freely and every test still starts from an empty database.
"""

from datetime import datetime, timezone
from typing import Optional

import pytest
from app.models import Base
from app.models.birthday import Birthday
from app.models.church import Church
from app.models.event import Event
from app.models.resource import Resource, ResourceKind
from fastapi.testclient import TestClient
from services.locks import MemoryScheduleLock
from services.repository import CalendarRepository
from sqlalchemy import create_engine, event as sa_event
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool


@pytest.fixture(scope="session")
def engine():
    """
    Create an in-memory SQLite engine for the test session.

    StaticPool keeps a single connection so the TestClient worker thread
    sees the same database as the test.
    """
    _engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @sa_event.listens_for(_engine, "connect")
    def set_sqlite_pragma(dbapi_connection, _):
        """Enable foreign key enforcement in SQLite."""
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
        # Let SQLAlchemy control transactions so savepoints and the
        # per-test rollback work (pysqlite's legacy mode skips BEGIN).
        dbapi_connection.isolation_level = None

    @sa_event.listens_for(_engine, "begin")
    def do_begin(conn):
        """Emit BEGIN explicitly, as pysqlite does not."""
        conn.exec_driver_sql("BEGIN")

    Base.metadata.create_all(bind=_engine)
    yield _engine
    Base.metadata.drop_all(bind=_engine)
    _engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine) -> Session:
    """
    Provide a database session that is rolled back after each test.

    ``create_savepoint`` turns the services' commits into savepoint releases
    inside the outer transaction.
    """
    connection = engine.connect()
    transaction = connection.begin()
    session = Session(
        bind=connection,
        join_transaction_mode="create_savepoint",
        expire_on_commit=False,
    )

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture
def repo(db_session) -> CalendarRepository:
    return CalendarRepository(db_session)


@pytest.fixture
def church(db_session) -> Church:
    """A persisted church with id ``church-1``."""
    record = make_church()
    db_session.add(record)
    db_session.flush()
    return record


@pytest.fixture
def client(db_session):
    """TestClient bound to the test session and a fresh in-process lock."""
    from app.db import get_session
    from app.dependencies import get_schedule_lock
    from app.main import app

    app.dependency_overrides[get_session] = lambda: db_session
    app.dependency_overrides[get_schedule_lock] = MemoryScheduleLock
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Reusable model factory helpers
# ---------------------------------------------------------------------------


def at(hour: int, minute: int = 0, day: int = 1, month: int = 6, year: int = 2024) -> datetime:
    """Return an aware UTC datetime, 1 June 2024 unless told otherwise."""
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


def make_church(church_id: str = "church-1", name: str = "Central Church") -> Church:
    """Return a new, unsaved Church instance."""
    return Church(id=church_id, name=name, address="100 Main St", color_code="#8b5e3b")


def make_resource(
    resource_id: str = "room-1",
    name: str = "Main Hall",
    kind: ResourceKind = ResourceKind.SPACE,
) -> Resource:
    """Return a new, unsaved Resource instance."""
    return Resource(id=resource_id, name=name, kind=kind, is_available=True)


def make_event(
    event_id: str = "event-1",
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    church_id: str = "church-1",
    resource_id: Optional[str] = None,
    title: Optional[str] = None,
) -> Event:
    """Return a new, unsaved Event, 10:00-11:00 on 1 June 2024 by default."""
    return Event(
        id=event_id,
        title=title or f"Event {event_id}",
        start_at=start or at(10),
        end_at=end or at(11),
        church_id=church_id,
        resource_id=resource_id,
        all_day=False,
    )


def make_birthday(
    birthday_id: str = "bday-1",
    day: int = 10,
    month: int = 6,
    birth_year: Optional[int] = None,
    name: Optional[str] = None,
    church_id: Optional[str] = None,
) -> Birthday:
    """Return a new, unsaved Birthday instance."""
    return Birthday(
        id=birthday_id,
        name=name or f"Person {birthday_id}",
        day=day,
        month=month,
        birth_year=birth_year,
        church_id=church_id,
    )
