"""In-memory collaborators for testing and development."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field

from litestar_library.base import BaseBookRepository, BaseMemberService, BaseNotificationService
from litestar_library.exceptions import ConfigurationError, LibraryError
from litestar_library.types import Book, LendingAction, LendingEvent

__all__ = (
    "MemoryBookRepository",
    "MemoryMemberConfig",
    "MemoryMemberService",
    "MemoryNotificationConfig",
    "MemoryNotificationService",
    "MemoryRepositoryConfig",
)

logger = logging.getLogger(__name__)


@dataclass
class MemoryRepositoryConfig:
    """Configuration for the in-memory book repository.

    Attributes:
        max_titles: Maximum number of distinct titles to store (None for unlimited)
    """

    max_titles: int | None = None


@dataclass
class MemoryMemberConfig:
    """Configuration for the in-memory member service.

    Attributes:
        members: Member identifiers that are valid from the start
    """

    members: frozenset[int] = field(default_factory=frozenset)


@dataclass
class MemoryNotificationConfig:
    """Configuration for the in-memory notifier.

    Attributes:
        max_events: Number of events to keep, oldest dropped first (None for unlimited)
    """

    max_events: int | None = None


class MemoryBookRepository(BaseBookRepository):
    """In-memory book repository for testing and development.

    Books are kept in a dictionary keyed by title, in insertion order. The
    records handed out by find_book() are the stored objects themselves, so a
    caller that mutates one sees the change without saving. Data is lost when
    the instance goes away.

    Example:
        >>> repository = MemoryBookRepository(books=[Book("Dune", 2)])
        >>> repository.find_book("Dune")
        Book(title='Dune', copies=2)
        >>> repository.find_book("Emma") is None
        True
    """

    def __init__(
        self,
        config: MemoryRepositoryConfig | None = None,
        books: Iterable[Book] = (),
    ) -> None:
        """Initialize MemoryBookRepository.

        Args:
            config: Configuration for the repository (optional)
            books: Books to seed the repository with

        Raises:
            ConfigurationError: If max_titles is negative
        """
        self.config = config or MemoryRepositoryConfig()
        if self.config.max_titles is not None and self.config.max_titles < 0:
            raise ConfigurationError(f"max_titles must not be negative, got {self.config.max_titles}")

        self._books: dict[str, Book] = {}
        for book in books:
            self.save_book(book)

    def find_book(self, title: str) -> Book | None:
        """Look up a book by title.

        Args:
            title: Title of the book

        Returns:
            The stored record, or None if the title is unknown
        """
        return self._books.get(title)

    def save_book(self, book: Book) -> None:
        """Store a book record under its title.

        Args:
            book: Book record to persist

        Raises:
            LibraryError: If storing a new title would exceed max_titles
        """
        max_titles = self.config.max_titles
        if book.title not in self._books and max_titles is not None and len(self._books) >= max_titles:
            raise LibraryError(f"Max titles {max_titles} would be exceeded")

        self._books[book.title] = book

    def get_all_books(self) -> list[Book]:
        """Return every stored book in insertion order."""
        return list(self._books.values())

    def clear(self) -> None:
        """Remove every book."""
        self._books.clear()

    def __len__(self) -> int:
        return len(self._books)


class MemoryMemberService(BaseMemberService):
    """In-memory member registry.

    Example:
        >>> members = MemoryMemberService(MemoryMemberConfig(members=frozenset({1})))
        >>> members.is_valid_member(1)
        True
        >>> members.revoke(1)
        >>> members.is_valid_member(1)
        False
    """

    def __init__(self, config: MemoryMemberConfig | None = None) -> None:
        self.config = config or MemoryMemberConfig()
        self._members: set[int] = set(self.config.members)

    def is_valid_member(self, member_id: int) -> bool:
        return member_id in self._members

    def register(self, member_id: int) -> None:
        """Make a member valid for borrowing."""
        self._members.add(member_id)

    def revoke(self, member_id: int) -> None:
        """Remove a member. Unknown members are ignored."""
        self._members.discard(member_id)


class MemoryNotificationService(BaseNotificationService):
    """In-memory notifier that records lending events.

    Each notification is stored as a LendingEvent and logged at INFO level on
    this module's logger. Useful for asserting on notifications in tests and
    for inspecting activity in development.
    """

    def __init__(self, config: MemoryNotificationConfig | None = None) -> None:
        """Initialize MemoryNotificationService.

        Args:
            config: Configuration for the notifier (optional)

        Raises:
            ConfigurationError: If max_events is negative
        """
        self.config = config or MemoryNotificationConfig()
        if self.config.max_events is not None and self.config.max_events < 0:
            raise ConfigurationError(f"max_events must not be negative, got {self.config.max_events}")

        self._events: deque[LendingEvent] = deque(maxlen=self.config.max_events)

    def notify_borrow(self, member_id: int, title: str) -> None:
        self._record("borrow", member_id, title)

    def notify_return(self, member_id: int, title: str) -> None:
        self._record("return", member_id, title)

    @property
    def events(self) -> tuple[LendingEvent, ...]:
        """Recorded events, oldest first."""
        return tuple(self._events)

    def clear(self) -> None:
        """Forget every recorded event."""
        self._events.clear()

    def _record(self, action: LendingAction, member_id: int, title: str) -> None:
        self._events.append(LendingEvent(action=action, member_id=member_id, title=title))
        logger.info("Member %s %s %r", member_id, "borrowed" if action == "borrow" else "returned", title)
