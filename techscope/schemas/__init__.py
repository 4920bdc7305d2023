"""Pydantic request/response schemas."""

from techscope.schemas.auth import LoginRequest, TokenResponse
from techscope.schemas.health import HealthResponse
from techscope.schemas.users import (
    RegisterUserRequest,
    UniqueEmailRequest,
    UserRecord,
    UserResponse,
)

__all__ = [
    "HealthResponse",
    "LoginRequest",
    "RegisterUserRequest",
    "TokenResponse",
    "UniqueEmailRequest",
    "UserRecord",
    "UserResponse",
]
