"""Request and response schemas for the user endpoints.

Request fields are plain strings. Length and format rules are checked by
the domain layer, which answers with a 400 VALIDATION_ERROR.
"""

from pydantic import BaseModel, ConfigDict, Field

from userbase.domain.user import User


class CreateUserRequest(BaseModel):
    """Request schema for creating a new user."""

    name: str = Field(..., description="Display name (1-100 characters)")
    email: str = Field(..., description="Unique email address (max 100 characters)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"name": "Ana", "email": "ana@example.com"},
        },
    )


class UpdateUserRequest(BaseModel):
    """Request schema for a partial update; omitted fields stay unchanged."""

    name: str | None = Field(None, description="New display name")
    email: str | None = Field(None, description="New email address")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"name": "Ana Beatriz"},
        },
    )


class UserResponse(BaseModel):
    """Response schema for a single user."""

    id: str
    name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(id=user.id, name=user.name, email=user.email)


class UserPageResponse(BaseModel):
    """One page of users with navigation metadata."""

    items: list[UserResponse] = Field(..., description="Users on this page")
    total: int = Field(..., description="Total number of users")
    page: int = Field(..., description="Current page number")
    page_size: int = Field(..., alias="pageSize", description="Items per page")
    total_pages: int = Field(..., alias="totalPages", description="Number of pages")

    model_config = ConfigDict(populate_by_name=True)
