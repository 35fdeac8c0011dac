"""
Shared fixtures: an in-memory SQLite store and an API client bound to it.
"""

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.database.database import build_engine, create_db_and_tables
from app.database.store import TodoStore
from app.main import create_app
from app.services.todo_service import TodoService


@pytest.fixture
def test_settings():
    """Settings pointing at a private in-memory database."""
    return Settings(database_url="sqlite://", log_level="INFO")


@pytest.fixture
def test_engine():
    """Fresh in-memory engine with the todos table created."""
    engine = build_engine("sqlite://")
    create_db_and_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(test_engine):
    return TodoStore(test_engine)


@pytest.fixture
def service(store):
    return TodoService(store)


@pytest.fixture
def client(test_settings):
    """Test client; entering the context runs the application lifespan."""
    app = create_app(test_settings)
    with TestClient(app) as client:
        yield client
