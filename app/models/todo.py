"""
SQLModel database model for Todo records.
"""

from datetime import datetime
from enum import Enum

from sqlalchemy import Column
from sqlalchemy import Enum as SAEnum
from sqlmodel import Field, SQLModel


class TodoStatus(str, Enum):
    """Workflow stage of a todo."""

    TODO = "Todo"
    DOING = "Doing"
    DONE = "Done"

    @classmethod
    def parse(cls, value) -> "TodoStatus | None":
        """Return the member whose literal value equals ``value``, else None."""
        for member in cls:
            if member.value == value:
                return member
        return None


class Todo(SQLModel, table=True):
    """
    One task on the board.

    The table stores the literal status values ("Todo", "Doing", "Done")
    rather than the enum member names.
    """

    __tablename__ = "todos"

    # Primary key
    id: int | None = Field(default=None, primary_key=True)

    # Opaque partition key, not tied to any user table
    username: str = Field(index=True, min_length=1)

    title: str = Field(min_length=1)

    # Timezone-naive wall-clock time
    target_datetime: datetime = Field(index=True)

    status: TodoStatus = Field(
        default=TodoStatus.TODO,
        sa_column=Column(
            SAEnum(
                TodoStatus,
                name="todo_status",
                values_callable=lambda statuses: [s.value for s in statuses],
                validate_strings=True,
            ),
            nullable=False,
            default=TodoStatus.TODO,
        ),
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"<Todo {self.id}: [{TodoStatus(self.status).value}] "
            f"{self.username}/{self.title}>"
        )
