"""Request-scoped dependencies for the user API.

The engine, session maker and settings belong to the application instance
(``app.state``) and are set up by ``create_app`` and its lifespan, so two
apps built with different settings never share a database pool.
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from userbase.application.services import UserService
from userbase.domain.shared.exceptions import StoreError
from userbase.domain.user import UserRepository
from userbase.infrastructure.persistence.sqlalchemy import UserRepositorySQLAlchemy
from userbase_config.settings import Settings


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


def get_session_maker(request: Request) -> async_sessionmaker[AsyncSession]:
    return request.app.state.session_maker


async def get_db_session(
    session_maker: Annotated[
        async_sessionmaker[AsyncSession],
        Depends(get_session_maker),
    ],
) -> AsyncGenerator[AsyncSession, None]:
    """One session per request; whatever is not committed is rolled back."""
    async with session_maker() as session:
        yield session


async def commit_session(session: AsyncSession) -> None:
    """Commit the request transaction, reporting failures as StoreError."""
    try:
        await session.commit()
    except SQLAlchemyError as e:
        await session.rollback()
        msg = "Failed to commit changes"
        raise StoreError(msg) from e


DBSession = Annotated[AsyncSession, Depends(get_db_session)]

AppSettings = Annotated[Settings, Depends(get_app_settings)]


def get_user_repository(session: DBSession) -> UserRepository:
    return UserRepositorySQLAlchemy(session)


def get_user_service(
    user_repository: Annotated[UserRepository, Depends(get_user_repository)],
) -> UserService:
    return UserService(user_repository)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
