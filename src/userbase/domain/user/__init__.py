"""User domain.

This domain handles:
- User aggregate (id, name, email)
- Field validation rules shared by create and update
- The repository contract that owns email uniqueness
"""

from userbase.domain.user.aggregates import User, generate_user_id
from userbase.domain.user.exceptions import (
    EmailAlreadyExistsError,
    UserNotFoundError,
    UserValidationError,
)
from userbase.domain.user.repositories import UserRepository
from userbase.domain.user.validation import (
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    FieldViolation,
    collect_violations,
    ensure_valid,
    validate_email,
    validate_name,
)

__all__ = [
    "EMAIL_MAX_LENGTH",
    "NAME_MAX_LENGTH",
    "EmailAlreadyExistsError",
    "FieldViolation",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserValidationError",
    "collect_violations",
    "ensure_valid",
    "generate_user_id",
    "validate_email",
    "validate_name",
]
