"""Errors raised for user data and user lookups."""

from userbase.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class UserValidationError(ValidationError):
    """A user field failed its length or format constraint."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(
            f"Invalid {field}: {reason}",
            details={"field": field, "reason": reason},
        )


class UserNotFoundError(EntityNotFoundError):
    default_code = ErrorCode.USER_NOT_FOUND

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(f"User #{user_id} not found", details={"user_id": user_id})


class EmailAlreadyExistsError(ConflictError):
    """Another user already owns this email."""

    default_code = ErrorCode.EMAIL_ALREADY_EXISTS
    field = "email"

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "email already in use",
            details={"field": self.field, "email": email},
        )
