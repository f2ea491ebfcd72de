"""Input contracts for user commands."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from userbase.domain.user.exceptions import UserValidationError

UPDATABLE_FIELDS = ("name", "email")


@dataclass(frozen=True)
class CreateUserInput:
    """Payload for creating a user. Both fields are required."""

    name: str
    email: str

    def as_fields(self) -> dict[str, object]:
        return {"name": self.name, "email": self.email}


@dataclass(frozen=True)
class UpdateUserInput:
    """Payload for a partial update.

    ``None`` means the field is absent and is left untouched.
    """

    name: str | None = None
    email: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "UpdateUserInput":
        """Build from the set fields of a request body.

        A key that is present with a null value is rejected rather than
        silently treated as absent.
        """
        for field in UPDATABLE_FIELDS:
            if field in data and data[field] is None:
                raise UserValidationError(field, "must not be null")
        return cls(**{f: data[f] for f in UPDATABLE_FIELDS if f in data})

    def as_fields(self) -> dict[str, object]:
        """Only the fields that are present."""
        return {
            field: value
            for field, value in (("name", self.name), ("email", self.email))
            if value is not None
        }

    @property
    def is_empty(self) -> bool:
        return not self.as_fields()
