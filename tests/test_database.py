"""
Tests for engine construction and schema management.
"""

import os
import tempfile
from datetime import datetime
from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy import inspect
from sqlalchemy.pool import StaticPool

from app.database.database import (
    build_engine,
    create_db_and_tables,
    get_db_health,
    init_db,
)
from app.database.store import TodoStore


@pytest.fixture
def temp_db_url():
    """Create a temporary database URL for testing."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as temp_file:
        temp_db_url = f"sqlite:///{temp_file.name}"
    yield temp_db_url
    try:
        os.unlink(temp_file.name)
    except FileNotFoundError:
        pass


class TestBuildEngine:
    """Test engine configuration."""

    def test_memory_sqlite_uses_static_pool(self):
        engine = build_engine("sqlite://")
        assert isinstance(engine.pool, StaticPool)
        engine.dispose()

    def test_file_sqlite_engine(self, temp_db_url):
        engine = build_engine(temp_db_url)
        assert str(engine.url).startswith("sqlite:///")
        assert not isinstance(engine.pool, StaticPool)
        engine.dispose()

    def test_echo_flag(self):
        engine = build_engine("sqlite://", echo=True)
        assert engine.echo is True
        engine.dispose()


class TestCreateDbAndTables:
    """Test table creation."""

    def test_creates_todos_table(self, temp_db_url):
        engine = build_engine(temp_db_url)
        create_db_and_tables(engine)

        columns = {c["name"] for c in inspect(engine).get_columns("todos")}
        assert columns == {"id", "username", "title", "target_datetime", "status"}
        engine.dispose()

    def test_is_idempotent(self, test_engine):
        create_db_and_tables(test_engine)
        create_db_and_tables(test_engine)
        assert inspect(test_engine).has_table("todos")

    @patch("app.database.database.SQLModel")
    def test_calls_create_all(self, mock_sqlmodel):
        mock_metadata = MagicMock()
        mock_sqlmodel.metadata = mock_metadata
        engine = MagicMock()

        create_db_and_tables(engine)

        mock_metadata.create_all.assert_called_once_with(engine)


class TestGetDbHealth:
    """Test database health check."""

    def test_healthy(self, test_engine):
        assert get_db_health(test_engine) is True

    @patch("app.database.database.Session")
    def test_unhealthy(self, mock_session_class):
        mock_session_class.side_effect = Exception("Connection failed")

        assert get_db_health(MagicMock()) is False


class TestInitDb:
    """Test database initialization."""

    @patch("app.database.database.create_db_and_tables")
    def test_init_db_creates_tables(self, mock_create_tables):
        engine = build_engine("sqlite://")

        init_db(engine)

        mock_create_tables.assert_called_once_with(engine)
        engine.dispose()

    def test_database_persistence(self, temp_db_url):
        """Data written through one engine is visible to the next."""
        first = build_engine(temp_db_url)
        init_db(first)
        todo_id = TodoStore(first).insert("alice", "Persist", datetime(2024, 1, 1))
        first.dispose()

        second = build_engine(temp_db_url)
        init_db(second)
        todos = TodoStore(second).list_all()
        second.dispose()

        assert [t.id for t in todos] == [todo_id]
