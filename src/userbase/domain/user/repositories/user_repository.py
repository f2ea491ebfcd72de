"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from userbase.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Implementations are the sole enforcement point for email uniqueness.
    Every ``save`` and ``delete`` is atomic for the single entity involved.
    """

    @abstractmethod
    async def save(self, user: User) -> None:
        """Insert or update a user.

        Raises
        ------
        EmailAlreadyExistsError
            If another user already holds the same email.
        StoreError
            For any other persistence failure.
        """

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find a user by their ID, or return None."""

    @abstractmethod
    async def find_page(self, offset: int, limit: int) -> tuple[list[User], int]:
        """Return up to ``limit`` users starting at ``offset`` plus the total.

        Users are returned in the store's stable insertion order.
        """

    @abstractmethod
    async def delete(self, user: User) -> None:
        """Hard-delete a user.

        Raises
        ------
        StoreError
            For any persistence failure.
        """
