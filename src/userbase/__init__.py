"""userbase - User account management service.

Layers:
- domain: User aggregate, field validation, repository contract, errors
- application: input contracts, paginated results, UserService
- infrastructure: SQLAlchemy and in-memory repositories
- presentation: FastAPI boundary and Typer CLI
"""

from userbase.application.dtos import CreateUserInput, UpdateUserInput, UserPage
from userbase.application.services import UserService
from userbase.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    StoreError,
    ValidationError,
)
from userbase.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
    UserRepository,
    UserValidationError,
)

__all__ = [
    # Domain
    "EmailAlreadyExistsError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserValidationError",
    # Errors
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "StoreError",
    "ValidationError",
    # Application
    "CreateUserInput",
    "UpdateUserInput",
    "UserPage",
    "UserService",
]
