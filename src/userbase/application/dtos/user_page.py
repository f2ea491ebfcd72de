"""DTO for a page of users."""

from dataclasses import dataclass, field

from userbase.domain.user import User


def count_pages(total: int, page_size: int) -> int:
    """Number of pages needed for ``total`` items; 0 when there are none."""
    if total <= 0:
        return 0
    return (total + page_size - 1) // page_size


@dataclass(frozen=True)
class UserPage:
    """One page of users plus the counts needed to navigate the rest."""

    items: list[User] = field(default_factory=list)
    total: int = 0
    page: int = 1
    page_size: int = 10
    total_pages: int = 0

    @classmethod
    def create(
        cls,
        items: list[User],
        total: int,
        page: int,
        page_size: int,
    ) -> "UserPage":
        return cls(
            items=items,
            total=total,
            page=page,
            page_size=page_size,
            total_pages=count_pages(total, page_size),
        )

    def to_dict(self) -> dict:
        return {
            "items": [user.to_dict() for user in self.items],
            "total": self.total,
            "page": self.page,
            "pageSize": self.page_size,
            "totalPages": self.total_pages,
        }
