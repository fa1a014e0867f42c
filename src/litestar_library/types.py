"""Type definitions for litestar-library."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal

__all__ = (
    "Book",
    "LendingAction",
    "LendingEvent",
)

LendingAction = Literal["borrow", "return"]


@dataclass
class Book:
    """A lendable title and the number of copies currently on the shelf.

    Book records are owned by a repository. The service mutates ``copies``
    in place and then hands the same object back to the repository to persist.

    Attributes:
        title: Title of the book, unique within a repository
        copies: Number of copies available for lending (never negative at rest)
    """

    title: str
    copies: int = 0

    @property
    def is_available(self) -> bool:
        """Whether at least one copy can be borrowed."""
        return self.copies > 0


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


@dataclass(frozen=True)
class LendingEvent:
    """A borrow or return that was reported to a notifier.

    Attributes:
        action: Either "borrow" or "return"
        member_id: Member that borrowed or returned the book
        title: Title passed to the lending operation
        occurred_at: Timestamp the notification was recorded (UTC)
    """

    action: LendingAction
    member_id: int
    title: str
    occurred_at: datetime = field(default_factory=_utcnow)
