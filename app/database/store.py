"""
Todo Store: the single ``todos`` table and the statements run against it.
"""

from datetime import datetime
from typing import List

from sqlalchemy import delete, update
from sqlalchemy.engine import Engine
from sqlmodel import Session, select

from app.models.todo import Todo, TodoStatus


class TodoStore:
    """
    Persistence handle over an injected engine.

    Every method runs exactly one statement in its own session. Database
    errors (``SQLAlchemyError``) propagate to the caller untouched.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def list_all(self) -> List[Todo]:
        """All todos, latest target first, ties in insertion order."""
        query = select(Todo).order_by(Todo.target_datetime.desc(), Todo.id.asc())
        with Session(self.engine) as session:
            return list(session.exec(query).all())

    def list_by_user(self, username: str) -> List[Todo]:
        """Todos whose username matches exactly, same ordering as list_all."""
        query = (
            select(Todo)
            .where(Todo.username == username)
            .order_by(Todo.target_datetime.desc(), Todo.id.asc())
        )
        with Session(self.engine) as session:
            return list(session.exec(query).all())

    def insert(self, username: str, title: str, target_datetime: datetime) -> int:
        """Insert a new todo in the Todo state and return its generated id."""
        todo = Todo(
            username=username,
            title=title,
            target_datetime=target_datetime,
            status=TodoStatus.TODO,
        )
        with Session(self.engine) as session:
            session.add(todo)
            session.commit()
            session.refresh(todo)
            return todo.id

    def update_status(self, todo_id: int, status: TodoStatus) -> int:
        """Overwrite the status of one todo. Returns the affected row count."""
        statement = update(Todo).where(Todo.id == todo_id).values(status=status)
        with Session(self.engine) as session:
            result = session.exec(statement)
            session.commit()
            return result.rowcount

    def delete(self, todo_id: int) -> int:
        """Delete one todo by id. Returns the affected row count."""
        statement = delete(Todo).where(Todo.id == todo_id)
        with Session(self.engine) as session:
            result = session.exec(statement)
            session.commit()
            return result.rowcount
