"""
Pydantic schemas for Todo API request/response validation.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from app.models.todo import TodoStatus


STORAGE_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class TodoCreate(BaseModel):
    """
    Body of ``POST /api/todos``.

    Fields are optional here so that a missing value reaches the service
    and is reported as a 400 with the API's own message.
    """

    username: Optional[str] = None
    title: Optional[str] = None
    target_datetime: Optional[str] = Field(
        None, description="ISO-8601-like date/time, e.g. 2024-05-01T10:00:00.000Z"
    )


class StatusUpdate(BaseModel):
    """Body of ``PUT /api/todos/{id}``."""

    # Checked against TodoStatus by the service
    status: Optional[Any] = None


class TodoResponse(BaseModel):
    """Schema for one Todo record in API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    title: str
    target_datetime: datetime
    status: TodoStatus

    @field_serializer("target_datetime")
    def serialize_target_datetime(self, value: datetime) -> str:
        return value.strftime(STORAGE_DATETIME_FORMAT)


class MessageResponse(BaseModel):
    """Schema for plain acknowledgement and error bodies."""

    message: str


class TodoCreatedResponse(MessageResponse):
    """Schema for the create acknowledgement."""

    id: int
