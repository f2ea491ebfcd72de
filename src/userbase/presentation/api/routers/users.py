"""User resource endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query, status

from userbase.application.dtos import CreateUserInput, UpdateUserInput
from userbase.domain.user import UserValidationError
from userbase.presentation.api.dependencies import (
    AppSettings,
    DBSession,
    UserServiceDep,
    commit_session,
)
from userbase.presentation.api.schemas import (
    CreateUserRequest,
    ErrorResponse,
    UpdateUserRequest,
    UserPageResponse,
    UserResponse,
)

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
    responses={
        201: {"description": "User successfully created"},
        400: {"model": ErrorResponse, "description": "Invalid name or email"},
        409: {"model": ErrorResponse, "description": "Email already in use"},
    },
)
async def create_user(
    request: CreateUserRequest,
    session: DBSession,
    service: UserServiceDep,
) -> UserResponse:
    """Create a user with a name and a unique email address."""
    user = await service.create(
        CreateUserInput(name=request.name, email=request.email),
    )
    await commit_session(session)
    return UserResponse.from_user(user)


@router.get(
    "",
    summary="List users",
    responses={
        200: {"description": "One page of users"},
        400: {"model": ErrorResponse, "description": "Page size too large"},
    },
)
async def list_users(
    service: UserServiceDep,
    settings: AppSettings,
    page: Annotated[int, Query(ge=1, description="Page number")] = 1,
    page_size: Annotated[
        int | None,
        Query(alias="pageSize", ge=1, description="Items per page"),
    ] = None,
) -> UserPageResponse:
    """List users in insertion order, one page at a time."""
    if page_size is None:
        page_size = settings.default_page_size
    if page_size > settings.max_page_size:
        raise UserValidationError(
            "page_size",
            f"must be at most {settings.max_page_size}",
        )

    result = await service.find_all(page=page, page_size=page_size)
    return UserPageResponse(
        items=[UserResponse.from_user(u) for u in result.items],
        total=result.total,
        page=result.page,
        page_size=result.page_size,
        total_pages=result.total_pages,
    )


@router.get(
    "/{user_id}",
    summary="Get a user by ID",
    responses={
        200: {"description": "User found"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def get_user(user_id: str, service: UserServiceDep) -> UserResponse:
    """Return the user with the given ID."""
    user = await service.find_one(user_id)
    return UserResponse.from_user(user)


@router.patch(
    "/{user_id}",
    summary="Update a user",
    responses={
        200: {"description": "User successfully updated"},
        400: {"model": ErrorResponse, "description": "Invalid name or email"},
        404: {"model": ErrorResponse, "description": "User not found"},
        409: {"model": ErrorResponse, "description": "Email already in use"},
    },
)
async def update_user(
    user_id: str,
    request: UpdateUserRequest,
    session: DBSession,
    service: UserServiceDep,
) -> UserResponse:
    """Change the supplied fields of a user; omitted fields stay as they are."""
    changes = UpdateUserInput.from_mapping(request.model_dump(exclude_unset=True))
    user = await service.update(user_id, changes)
    await commit_session(session)
    return UserResponse.from_user(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
    responses={
        204: {"description": "User successfully deleted"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def delete_user(
    user_id: str,
    session: DBSession,
    service: UserServiceDep,
) -> None:
    """Permanently delete a user."""
    await service.remove(user_id)
    await commit_session(session)
