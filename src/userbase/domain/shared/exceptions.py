"""Error taxonomy shared by every layer.

Each class carries a default ``ErrorCode``; the API maps codes to HTTP
statuses, so codes are part of the public contract.
"""

from enum import Enum
from typing import Any, ClassVar


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    CONFLICT = "CONFLICT"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    STORE_ERROR = "STORE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base of all userbase errors.

    Attributes
    ----------
    message
        Text that is safe to show to API clients
    code
        Stable machine-readable code
    details
        Structured context such as the offending ``field``
    """

    default_code: ClassVar[ErrorCode] = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, "
            f"code={self.code.value}, details={self.details!r})"
        )


class ValidationError(DomainException):
    """Input broke a field constraint; nothing was written."""

    default_code = ErrorCode.VALIDATION_ERROR


class EntityNotFoundError(DomainException):
    default_code = ErrorCode.ENTITY_NOT_FOUND


class ConflictError(DomainException):
    """The write would break a uniqueness rule of the store."""

    default_code = ErrorCode.CONFLICT


class StoreError(DomainException):
    """Any persistence failure that is not a conflict.

    Raised with the driver exception chained as ``__cause__``.
    """

    default_code = ErrorCode.STORE_ERROR

    def __init__(
        self,
        message: str = "The data store is unavailable",
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)
