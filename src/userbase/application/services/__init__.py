"""Application layer services."""

from userbase.application.services.user_service import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    UserService,
)

__all__ = [
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_SIZE",
    "UserService",
]
