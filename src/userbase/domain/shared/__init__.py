"""Shared domain building blocks."""

from userbase.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    StoreError,
    ValidationError,
)
from userbase.domain.shared.time import utc_now

__all__ = [
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "StoreError",
    "ValidationError",
    "utc_now",
]
