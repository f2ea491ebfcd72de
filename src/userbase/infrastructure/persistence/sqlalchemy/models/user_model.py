"""Table mapping for users."""

from datetime import datetime

from sqlalchemy import DateTime, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from userbase.domain.shared.time import utc_now
from userbase.domain.user.validation import EMAIL_MAX_LENGTH, NAME_MAX_LENGTH
from userbase.infrastructure.persistence.sqlalchemy.models.base import Base

EMAIL_UNIQUE_CONSTRAINT = "users_email_unique"


class UserModel(Base):
    """Row for one user.

    ``created_at`` only orders listings by insertion; it is not part of the
    domain entity and never changes after the insert.
    """

    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("email", name=EMAIL_UNIQUE_CONSTRAINT),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    email: Mapped[str] = mapped_column(String(EMAIL_MAX_LENGTH), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email})>"
