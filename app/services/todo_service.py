"""
Business logic service for Todo operations.
"""

import logging
from datetime import datetime
from typing import Any, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from app.database.store import TodoStore
from app.models.todo import Todo, TodoStatus
from app.schemas.auth import IdentityClaim
from app.services.errors import StorageError, ValidationError


logger = logging.getLogger(__name__)


def normalize_target_datetime(value: str) -> datetime:
    """
    Convert a client date/time string to the naive form the store keeps.

    The first ``T`` becomes a space, the first ``Z`` is removed and anything
    from the first ``.`` on is dropped, so ``2024-05-01T10:00:00.000Z``
    becomes ``2024-05-01 10:00:00``. A leftover UTC offset is discarded.
    The remainder is read with ``datetime.fromisoformat`` (Python 3.11 rules).

    Raises:
        ValidationError: the remainder is not a date/time
    """
    cleaned = value.replace("T", " ", 1).replace("Z", "", 1).split(".", 1)[0].strip()
    try:
        parsed = datetime.fromisoformat(cleaned)
    except ValueError:
        raise ValidationError("Invalid target_datetime")
    return parsed.replace(tzinfo=None, microsecond=0)


class TodoService:
    """
    Todo operations over an injected store.

    Holds no state between requests. Storage failures are logged here and
    surfaced as StorageError with a generic message.
    """

    def __init__(self, store: TodoStore):
        self.store = store

    def authenticate(self, username: Optional[str]) -> IdentityClaim:
        """Accept any non-empty username. No credential is checked."""
        if not username:
            raise ValidationError("Username is required")
        return IdentityClaim(username=username)

    def list_all(self) -> List[Todo]:
        try:
            return self.store.list_all()
        except SQLAlchemyError:
            logger.exception("Failed to list todos")
            raise StorageError("Database error")

    def list_by_user(self, username: str) -> List[Todo]:
        try:
            return self.store.list_by_user(username)
        except SQLAlchemyError:
            logger.exception(f"Failed to list todos for user '{username}'")
            raise StorageError("Database error")

    def create(
        self,
        username: Optional[str],
        title: Optional[str],
        target_datetime: Optional[str],
    ) -> int:
        """
        Create a todo in the Todo state.

        Args:
            username: Owner of the todo
            title: Task text
            target_datetime: ISO-8601-like date/time string

        Returns:
            int: Id generated by the store

        Raises:
            ValidationError: a field is missing or the date/time is unreadable
            StorageError: the insert failed
        """
        if not username or not title or not target_datetime:
            raise ValidationError("Missing fields")

        normalized = normalize_target_datetime(target_datetime)

        try:
            todo_id = self.store.insert(username, title, normalized)
        except SQLAlchemyError:
            logger.exception("Failed to insert todo")
            raise StorageError("Insert failed")

        logger.info(f"Created todo: id={todo_id}, username='{username}'")
        return todo_id

    def set_status(self, todo_id: int, status: Any) -> None:
        """
        Overwrite the status of a todo.

        An unknown id is not an error: the update matches no rows and the
        call still succeeds.

        Raises:
            ValidationError: status is not Todo, Doing or Done
            StorageError: the update failed
        """
        new_status = TodoStatus.parse(status)
        if new_status is None:
            raise ValidationError("Invalid status")

        try:
            affected = self.store.update_status(todo_id, new_status)
        except SQLAlchemyError:
            logger.exception(f"Failed to update status of todo {todo_id}")
            raise StorageError("Update failed")

        logger.info(f"Updated todo status: id={todo_id}, status={new_status.value}, rows={affected}")

    def delete(self, todo_id: int) -> None:
        """Delete a todo by id. Succeeds even when nothing matched."""
        try:
            affected = self.store.delete(todo_id)
        except SQLAlchemyError:
            logger.exception(f"Failed to delete todo {todo_id}")
            raise StorageError("Delete failed")

        logger.info(f"Deleted todo: id={todo_id}, rows={affected}")
