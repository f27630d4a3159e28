"""
Database engine and session management.

Builds the SQLAlchemy engine from environment configuration with a test
fallback (SQLite in-memory) and exposes the FastAPI session dependency.
"""
import logging
import os
import sys
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

_POSTGRES_VARS = ("POSTGRES_USER", "POSTGRES_PASSWORD", "POSTGRES_HOST", "POSTGRES_PORT", "POSTGRES_DB")
IN_MEMORY_URL = "sqlite+pysqlite:///:memory:"


def _get_database_url() -> str:
    # If DATABASE_URL is explicitly set, use it
    if os.getenv("DATABASE_URL"):
        return os.getenv("DATABASE_URL")

    # Otherwise build from the POSTGRES_* components when any of them is set (all must be)
    values = {name: os.getenv(name) for name in _POSTGRES_VARS}
    if any(values.values()):
        missing = [name for name, value in values.items() if not value]
        if missing:
            raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")
        return (
            f"postgresql://{values['POSTGRES_USER']}:{values['POSTGRES_PASSWORD']}"
            f"@{values['POSTGRES_HOST']}:{values['POSTGRES_PORT']}/{values['POSTGRES_DB']}"
        )

    return f"sqlite+pysqlite:///{os.getenv('KANBAN_SQLITE_PATH', 'kanban.db')}"


def _is_pytest_runtime() -> bool:
    """Best-effort detection that we're executing under pytest.

    ``PYTEST_CURRENT_TEST`` is only set while a test runs, so also check for
    the pytest package in ``sys.modules`` which holds from collection on.
    """
    if os.getenv("PYTEST_RUNNING") == "1":
        return True
    if "PYTEST_CURRENT_TEST" in os.environ:
        return True
    return "pytest" in sys.modules


def _engine_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {}
    kwargs = {"connect_args": {"check_same_thread": False}}
    if ":memory:" in url:
        # One shared connection so the schema survives across sessions
        kwargs["poolclass"] = StaticPool
    return kwargs


def create_session_factory(url: str):
    """Return ``(engine, sessionmaker)`` bound to ``url``."""
    eng = create_engine(url, **_engine_kwargs(url))
    return eng, sessionmaker(autocommit=False, autoflush=False, bind=eng)


# Test override strategy:
# 1. If KANBAN_TEST_DB is set, use it.
# 2. Else under pytest force in-memory sqlite.
# 3. Else use the configured database.
explicit_test_db = os.getenv("KANBAN_TEST_DB")
if explicit_test_db:
    DATABASE_URL = explicit_test_db
elif _is_pytest_runtime():
    DATABASE_URL = IN_MEMORY_URL
else:
    DATABASE_URL = _get_database_url()

engine, SessionLocal = create_session_factory(DATABASE_URL)


def init_db(drop: bool = False) -> None:
    """Create (optionally recreate) all tables on the configured engine."""
    from kanban.db import models  # local import to avoid circular import at module load

    if drop:
        models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)
    logger.info("schema_ready: url=%s drop=%s", engine.url.render_as_string(hide_password=True), drop)


def get_db():
    """Dependency to get a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
