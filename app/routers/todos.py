"""
Todo Board API Routers
"""

from typing import List

from fastapi import APIRouter, Depends, Path, Request

from app.schemas.todo import (
    MessageResponse,
    StatusUpdate,
    TodoCreate,
    TodoCreatedResponse,
    TodoResponse,
)
from app.services.todo_service import TodoService


# Signed 64-bit range of the id column
MIN_TODO_ID = -(2**63)
MAX_TODO_ID = 2**63 - 1


# Dependencies functions
def get_todo_service(request: Request) -> TodoService:
    """FastAPI dependency that binds a service to the application's store."""
    return TodoService(request.app.state.store)


# Router
router = APIRouter(
    prefix="/todos",
    tags=["todos"],
    responses={
        400: {"model": MessageResponse, "description": "Invalid input"},
        500: {"model": MessageResponse, "description": "Storage failure"},
    },
)


# Store-bound handlers are sync; FastAPI runs them in its thread pool.
@router.get("", response_model=List[TodoResponse], summary="List All Todos")
def list_todos(service: TodoService = Depends(get_todo_service)):
    """Every todo, latest target date/time first."""
    return service.list_all()


@router.get(
    "/{username}", response_model=List[TodoResponse], summary="List Todos of a User"
)
def list_user_todos(
    username: str = Path(..., description="Exact username to filter by"),
    service: TodoService = Depends(get_todo_service),
):
    """Todos owned by one username. Unknown usernames give an empty list."""
    return service.list_by_user(username)


@router.post("", response_model=TodoCreatedResponse, summary="Create Todo")
def create_todo(
    todo_data: TodoCreate,
    service: TodoService = Depends(get_todo_service),
):
    """Create a todo in the Todo state and return its id."""
    todo_id = service.create(
        todo_data.username, todo_data.title, todo_data.target_datetime
    )
    return TodoCreatedResponse(message="Todo created", id=todo_id)


@router.put("/{todo_id}", response_model=MessageResponse, summary="Update Todo Status")
def update_todo_status(
    status_update: StatusUpdate,
    todo_id: int = Path(..., ge=MIN_TODO_ID, le=MAX_TODO_ID, description="Todo ID"),
    service: TodoService = Depends(get_todo_service),
):
    """Set the status of a todo to Todo, Doing or Done."""
    service.set_status(todo_id, status_update.status)
    return MessageResponse(message="Status updated")


@router.delete("/{todo_id}", response_model=MessageResponse, summary="Delete Todo")
def delete_todo(
    todo_id: int = Path(..., ge=MIN_TODO_ID, le=MAX_TODO_ID, description="Todo ID"),
    service: TodoService = Depends(get_todo_service),
):
    """Delete a todo by ID."""
    service.delete(todo_id)
    return MessageResponse(message="Todo deleted")
