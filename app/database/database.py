"""
Database engine construction and schema management using SQLModel.
"""

import logging

from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine, text

# Registers the todos table on SQLModel.metadata
from app.models.todo import Todo  # noqa: F401


logger = logging.getLogger(__name__)


def _is_memory_sqlite(database_url: str) -> bool:
    return database_url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in database_url


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create the engine that backs the todo store.

    SQLite connections are shared across the request thread pool, and an
    in-memory SQLite database is pinned to a single connection so every
    session sees the same data.
    """
    kwargs = {"echo": echo}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if _is_memory_sqlite(database_url):
            kwargs["poolclass"] = StaticPool

    return create_engine(database_url, **kwargs)


def create_db_and_tables(engine: Engine) -> None:
    """Create database tables if they don't exist."""
    SQLModel.metadata.create_all(engine)


def get_db_health(engine: Engine) -> bool:
    """
    Check database health/connectivity.

    Returns:
        bool: True if database is accessible, False otherwise
    """
    try:
        with Session(engine) as session:
            session.exec(text("SELECT 1")).one()
            return True
    except Exception as e:
        logger.warning(f"Database health check failed: {e}")
        return False


def init_db(engine: Engine) -> None:
    """Initialize database on application startup."""
    create_db_and_tables(engine)
    logger.info(f"Database ready at {engine.url.render_as_string(hide_password=True)}")
