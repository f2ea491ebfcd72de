"""Application service for the User resource.

Orchestrates validation, repository calls and pagination. The service holds
no state between calls; the repository is the single arbiter of email
uniqueness, so no existence pre-check is done before saving.
"""

import logging

from userbase.application.dtos import CreateUserInput, UpdateUserInput, UserPage
from userbase.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
    UserRepository,
    UserValidationError,
    ensure_valid,
)

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


class UserService:
    """Create, list, fetch, update and remove users."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def create(self, data: CreateUserInput) -> User:
        ensure_valid(data.as_fields())

        user = User.create(name=data.name, email=data.email)
        try:
            await self._user_repo.save(user)
        except EmailAlreadyExistsError:
            logger.warning("Rejected user creation, email in use: %s", data.email)
            raise

        logger.info("Created user %s", user.id)
        return user

    async def find_all(
        self,
        page: int = DEFAULT_PAGE,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> UserPage:
        """Return one page of users.

        Pages past the end yield no items but keep the same totals.
        """
        if page < 1:
            raise UserValidationError("page", "must be at least 1")
        if page_size < 1:
            raise UserValidationError("page_size", "must be at least 1")

        offset = (page - 1) * page_size
        items, total = await self._user_repo.find_page(offset, page_size)
        return UserPage.create(
            items=items,
            total=total,
            page=page,
            page_size=page_size,
        )

    async def find_one(self, user_id: str) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def update(self, user_id: str, data: UpdateUserInput) -> User:
        current = await self.find_one(user_id)
        ensure_valid(data.as_fields())

        updated = current.merged(name=data.name, email=data.email)
        try:
            await self._user_repo.save(updated)
        except EmailAlreadyExistsError:
            logger.warning(
                "Rejected update of user %s, email in use: %s",
                user_id,
                data.email,
            )
            raise

        if data.is_empty:
            logger.debug("Update of user %s carried no changes", user_id)
        else:
            logger.info(
                "Updated user %s (fields: %s)",
                user_id,
                ", ".join(data.as_fields()),
            )
        return updated

    async def remove(self, user_id: str) -> None:
        user = await self.find_one(user_id)
        await self._user_repo.delete(user)
        logger.info("Removed user %s", user_id)
