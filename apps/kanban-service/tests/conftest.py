from datetime import datetime, timedelta, UTC

import pytest
from sqlalchemy.orm import Session

from kanban.db.database import SessionLocal, engine
from kanban.db import models
from kanban.db.enums import State


@pytest.fixture(scope="session", autouse=True)
def create_schema_once():
    """Create all tables once per test session (in-memory SQLite shared via StaticPool)."""
    models.Base.metadata.create_all(bind=engine)
    yield
    models.Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def clean_data():
    """Truncate all tables between tests without dropping metadata."""
    with engine.begin() as connection:
        for table in reversed(models.Base.metadata.sorted_tables):
            connection.execute(table.delete())
    yield


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def user_factory(db_session: Session):
    def _create(name: str = "Sigurd", email: str | None = None):
        user = models.User(name=name, email=email or f"{name.lower()}@itu.dk")
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user
    return _create


@pytest.fixture
def tag_factory(db_session: Session):
    def _create(name: str):
        tag = models.Tag(name=name)
        db_session.add(tag)
        db_session.commit()
        db_session.refresh(tag)
        return tag
    return _create


@pytest.fixture
def work_item_factory(db_session: Session):
    """Insert a work item directly, bypassing the repository rules."""
    def _create(title: str, state: State = State.NEW, assigned_to=None, tags=()):
        item = models.WorkItem(title=title, state=state, assigned_to=assigned_to, tags=list(tags))
        db_session.add(item)
        db_session.commit()
        db_session.refresh(item)
        return item
    return _create


@pytest.fixture
def assert_recent():
    """Check a stored timestamp is close to now.

    SQLite hands back naive UTC datetimes, PostgreSQL aware ones.
    """
    def _check(value: datetime, seconds: float = 5.0):
        if value.tzinfo is not None:
            value = value.astimezone(UTC).replace(tzinfo=None)
        now = datetime.now(UTC).replace(tzinfo=None)
        assert abs(now - value) < timedelta(seconds=seconds)
    return _check
