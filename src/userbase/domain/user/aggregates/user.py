"""User aggregate."""

from uuid import uuid4


def generate_user_id() -> str:
    """Return a fresh opaque user identifier."""
    return str(uuid4())


class User:
    """
    User aggregate root.

    Identity is the ``id`` assigned at creation; ``name`` and ``email`` only
    change through ``merged``, which returns a new instance.
    """

    def __init__(
        self,
        name: str,
        email: str,
        id: str | None = None,
    ):
        self._id = id if id is not None else generate_user_id()
        self._name = name
        self._email = email

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @classmethod
    def create(cls, name: str, email: str) -> "User":
        return cls(name=name, email=email)

    @classmethod
    def reconstitute(cls, id: str, name: str, email: str) -> "User":
        return cls(id=id, name=name, email=email)

    def merged(self, name: str | None = None, email: str | None = None) -> "User":
        """Return a copy with the given fields replaced and the same id."""
        return User(
            id=self._id,
            name=self._name if name is None else name,
            email=self._email if email is None else email,
        )

    def to_dict(self) -> dict[str, str]:
        return {"id": self._id, "name": self._name, "email": self._email}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, name={self._name!r}, email={self._email})"
