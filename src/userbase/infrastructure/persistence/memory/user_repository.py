"""In-process implementation of UserRepository.

Useful for tests and for running the service without a database. The
unique email index and insertion order are kept next to the records and
guarded by one lock, so concurrent coroutines see the same conflict
behaviour as with the SQL store.
"""

import asyncio
import logging

from userbase.domain.user import EmailAlreadyExistsError, User, UserRepository

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """Dict-backed repository; dict order is the insertion order."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._ids_by_email: dict[str, str] = {}
        self._lock = asyncio.Lock()

    async def save(self, user: User) -> None:
        async with self._lock:
            owner = self._ids_by_email.get(user.email)
            if owner is not None and owner != user.id:
                raise EmailAlreadyExistsError(user.email)

            previous = self._users.get(user.id)
            if previous is not None and previous.email != user.email:
                del self._ids_by_email[previous.email]

            self._users[user.id] = user
            self._ids_by_email[user.email] = user.id

        if previous is None:
            logger.info("Created user: %s (email: %s)", user.id, user.email)
        else:
            logger.debug("Updated user: %s", user.id)

    async def find_by_id(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    async def find_page(self, offset: int, limit: int) -> tuple[list[User], int]:
        users = list(self._users.values())
        return users[offset : offset + limit], len(users)

    async def delete(self, user: User) -> None:
        async with self._lock:
            stored = self._users.pop(user.id, None)
            if stored is None:
                return
            self._ids_by_email.pop(stored.email, None)
        logger.info("Deleted user: %s", user.id)
