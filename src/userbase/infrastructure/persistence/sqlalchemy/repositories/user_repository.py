"""SQLAlchemy implementation of UserRepository."""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from userbase.domain.shared.exceptions import StoreError
from userbase.domain.user import EmailAlreadyExistsError, User, UserRepository
from userbase.infrastructure.persistence.sqlalchemy.models import (
    EMAIL_UNIQUE_CONSTRAINT,
    UserModel,
)

logger = logging.getLogger(__name__)


def _is_email_conflict(error: IntegrityError) -> bool:
    # PostgreSQL names the constraint, SQLite names the column.
    message = str(error.orig)
    return EMAIL_UNIQUE_CONSTRAINT in message or "users.email" in message


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    Writes run inside a SAVEPOINT, so a failed write is rolled back on its
    own and the session stays usable. Committing the surrounding
    transaction is left to the caller.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, user: User) -> None:
        try:
            async with self._session.begin_nested():
                existing = await self._find_model_by_id(user.id)
                if existing:
                    self._update_model(existing, user)
                else:
                    self._session.add(self._map_to_model(user))
                await self._session.flush()
        except IntegrityError as e:
            if _is_email_conflict(e):
                raise EmailAlreadyExistsError(user.email) from e
            msg = f"Failed to save user {user.id}"
            raise StoreError(msg, details={"user_id": user.id}) from e
        except SQLAlchemyError as e:
            msg = f"Failed to save user {user.id}"
            raise StoreError(msg, details={"user_id": user.id}) from e

        if existing:
            logger.debug("Updated user: %s", user.id)
        else:
            logger.info("Created user: %s (email: %s)", user.id, user.email)

    async def find_by_id(self, user_id: str) -> User | None:
        try:
            model = await self._find_model_by_id(user_id)
        except SQLAlchemyError as e:
            msg = f"Failed to load user {user_id}"
            raise StoreError(msg, details={"user_id": user_id}) from e

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_page(self, offset: int, limit: int) -> tuple[list[User], int]:
        stmt = (
            select(UserModel)
            .order_by(UserModel.created_at, UserModel.id)
            .offset(offset)
            .limit(limit)
        )
        count_stmt = select(func.count()).select_from(UserModel)

        try:
            result = await self._session.execute(stmt)
            models = result.scalars().all()
            total = (await self._session.execute(count_stmt)).scalar_one()
        except SQLAlchemyError as e:
            msg = "Failed to list users"
            raise StoreError(msg, details={"offset": offset, "limit": limit}) from e

        return [self._map_to_domain(model) for model in models], total

    async def delete(self, user: User) -> None:
        try:
            async with self._session.begin_nested():
                model = await self._find_model_by_id(user.id)
                if model is None:
                    return
                await self._session.delete(model)
                await self._session.flush()
        except SQLAlchemyError as e:
            msg = f"Failed to delete user {user.id}"
            raise StoreError(msg, details={"user_id": user.id}) from e

        logger.info("Deleted user: %s", user.id)

    async def _find_model_by_id(self, user_id: str) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            name=model.name,
            email=model.email,
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            name=user.name,
            email=user.email,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.name = user.name
        model.email = user.email
