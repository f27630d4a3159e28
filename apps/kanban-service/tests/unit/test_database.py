import os

import pytest
from sqlalchemy import inspect

from kanban.db import database


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("DATABASE_URL", "KANBAN_SQLITE_PATH", *database._POSTGRES_VARS):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_database_url_wins(clean_env):
    clean_env.setenv("DATABASE_URL", "sqlite:///custom.db")
    clean_env.setenv("POSTGRES_USER", "ignored")
    assert database._get_database_url() == "sqlite:///custom.db"


def test_postgres_url_from_components(clean_env):
    for name, value in zip(database._POSTGRES_VARS, ("u", "p", "db.local", "5432", "kanban")):
        clean_env.setenv(name, value)
    assert database._get_database_url() == "postgresql://u:p@db.local:5432/kanban"


def test_partial_postgres_config_raises(clean_env):
    clean_env.setenv("POSTGRES_USER", "u")
    clean_env.setenv("POSTGRES_HOST", "db.local")
    with pytest.raises(ValueError) as exc:
        database._get_database_url()
    assert "POSTGRES_PASSWORD" in str(exc.value)
    assert "POSTGRES_USER" not in str(exc.value)


def test_sqlite_fallback(clean_env):
    assert database._get_database_url() == "sqlite+pysqlite:///kanban.db"
    clean_env.setenv("KANBAN_SQLITE_PATH", "/tmp/board.db")
    assert database._get_database_url() == "sqlite+pysqlite:////tmp/board.db"


@pytest.mark.skipif(bool(os.getenv("KANBAN_TEST_DB")), reason="explicit test database configured")
def test_tests_run_against_in_memory_sqlite():
    assert database.DATABASE_URL == database.IN_MEMORY_URL
    assert database.engine.url.database == ":memory:"


def test_get_db_yields_and_closes_session():
    gen = database.get_db()
    db = next(gen)
    assert db.bind is database.engine
    with pytest.raises(StopIteration):
        next(gen)


def test_create_session_factory_for_file(tmp_path):
    eng, factory = database.create_session_factory(f"sqlite+pysqlite:///{tmp_path / 'k.db'}")
    try:
        with factory() as session:
            assert session.bind is eng
    finally:
        eng.dispose()


def test_init_db_creates_tables():
    database.init_db(drop=True)
    tables = set(inspect(database.engine).get_table_names())
    assert {"users", "tags", "work_items", "work_item_tags"} <= tables
