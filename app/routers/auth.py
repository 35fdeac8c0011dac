"""
Login stub router.
"""

from fastapi import APIRouter, Depends

from app.routers.todos import get_todo_service
from app.schemas.auth import LoginRequest, LoginResponse
from app.schemas.todo import MessageResponse
from app.services.todo_service import TodoService


router = APIRouter(tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={400: {"model": MessageResponse, "description": "Username missing"}},
    summary="Log In",
)
async def login(
    credentials: LoginRequest, service: TodoService = Depends(get_todo_service)
):
    """
    Accept any non-empty username.

    No password is checked and no token is issued; the client keeps the
    returned username itself.
    """
    claim = service.authenticate(credentials.username)
    return LoginResponse(success=True, message="Login successful", user=claim)
