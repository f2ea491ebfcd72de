"""SQLAlchemy models."""

from userbase.infrastructure.persistence.sqlalchemy.models.base import Base
from userbase.infrastructure.persistence.sqlalchemy.models.user_model import (
    EMAIL_UNIQUE_CONSTRAINT,
    UserModel,
)

__all__ = [
    "EMAIL_UNIQUE_CONSTRAINT",
    "Base",
    "UserModel",
]
