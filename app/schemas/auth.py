"""
Pydantic schemas for the login stub.
"""

from typing import Optional

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """Body of ``POST /api/login``."""

    username: Optional[str] = None


class IdentityClaim(BaseModel):
    """
    A username the client says it owns.

    Nothing has been verified: no password, no token. Do not use this type
    where an authenticated identity is required.
    """

    username: str


class LoginResponse(BaseModel):
    """Schema for a successful login stub response."""

    success: bool = True
    message: str
    user: IdentityClaim
