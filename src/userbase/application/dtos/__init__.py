"""User DTOs. Input contracts and paginated results."""

from userbase.application.dtos.user_inputs import CreateUserInput, UpdateUserInput
from userbase.application.dtos.user_page import UserPage, count_pages

__all__ = [
    "CreateUserInput",
    "UpdateUserInput",
    "UserPage",
    "count_pages",
]
