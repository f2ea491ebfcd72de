"""Pydantic schemas for the API."""

from userbase.presentation.api.schemas.common import ErrorResponse, HealthResponse
from userbase.presentation.api.schemas.users import (
    CreateUserRequest,
    UpdateUserRequest,
    UserPageResponse,
    UserResponse,
)

__all__ = [
    "CreateUserRequest",
    "ErrorResponse",
    "HealthResponse",
    "UpdateUserRequest",
    "UserPageResponse",
    "UserResponse",
]
