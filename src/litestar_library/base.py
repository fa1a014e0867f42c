"""Collaborator protocols and abstract implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from litestar_library.types import Book

__all__ = [
    "BaseBookRepository",
    "BaseMemberService",
    "BaseNotificationService",
    "BookRepository",
    "MemberService",
    "NotificationService",
]


@runtime_checkable
class BookRepository(Protocol):
    """Book repository protocol.

    The repository owns book records and is looked up by title. It is
    responsible for any persistence and for serializing concurrent writers;
    the library service treats it as a plain lookup/save store.
    """

    def find_book(self, title: str) -> Book | None:
        """Look up a book by title.

        Args:
            title: Title of the book

        Returns:
            The stored Book record, or None if no book has this title.
            Callers may mutate the returned record and pass it to save_book().
        """
        ...

    def save_book(self, book: Book) -> None:
        """Persist a book record.

        Saving a record whose title is unknown creates it; saving a record
        with a known title replaces the stored one.

        Args:
            book: Book record to persist

        Raises:
            LibraryError: If the repository cannot store the record
        """
        ...

    def get_all_books(self) -> list[Book]:
        """Return every book in the repository.

        Returns:
            Books in the repository's natural order. An empty repository
            returns an empty list.
        """
        ...


@runtime_checkable
class MemberService(Protocol):
    """Member validation protocol."""

    def is_valid_member(self, member_id: int) -> bool:
        """Check whether a member may borrow books.

        Args:
            member_id: Member identifier

        Returns:
            True if the member is valid, False otherwise
        """
        ...


@runtime_checkable
class NotificationService(Protocol):
    """Lending notification protocol.

    Implementations deliver borrow and return events to whoever needs them
    (email, queues, audit logs). Delivery failures should be raised, not
    swallowed.
    """

    def notify_borrow(self, member_id: int, title: str) -> None:
        """Report that a member borrowed a copy of a title.

        Args:
            member_id: Member that borrowed the book
            title: Title that was borrowed
        """
        ...

    def notify_return(self, member_id: int, title: str) -> None:
        """Report that a member returned a copy of a title.

        Args:
            member_id: Member that returned the book
            title: Title that was returned
        """
        ...


class BaseBookRepository(ABC):
    """Abstract base class providing common functionality for book repositories.

    Subclasses must implement:
    - find_book()
    - save_book()
    - get_all_books()

    This class provides default implementations for:
    - exists() - looks the title up with find_book()
    - close() - no-op
    """

    @abstractmethod
    def find_book(self, title: str) -> Book | None:
        """Look up a book by title. Must be implemented by subclasses."""

    @abstractmethod
    def save_book(self, book: Book) -> None:
        """Persist a book record. Must be implemented by subclasses."""

    @abstractmethod
    def get_all_books(self) -> list[Book]:
        """Return every book. Must be implemented by subclasses."""

    def exists(self, title: str) -> bool:
        """Check whether a title is known to the repository.

        Args:
            title: Title of the book

        Returns:
            True if find_book() returns a record, False otherwise
        """
        return self.find_book(title) is not None

    def close(self) -> None:  # noqa: B027
        """Default implementation: no-op.

        Repositories holding connections or file handles should override this
        to release them.
        """


class BaseMemberService(ABC):
    """Abstract base class for member services."""

    @abstractmethod
    def is_valid_member(self, member_id: int) -> bool:
        """Check member validity. Must be implemented by subclasses."""

    def close(self) -> None:  # noqa: B027
        """Default implementation: no-op."""


class BaseNotificationService(ABC):
    """Abstract base class for notification services."""

    @abstractmethod
    def notify_borrow(self, member_id: int, title: str) -> None:
        """Report a borrow. Must be implemented by subclasses."""

    @abstractmethod
    def notify_return(self, member_id: int, title: str) -> None:
        """Report a return. Must be implemented by subclasses."""

    def close(self) -> None:  # noqa: B027
        """Default implementation: no-op."""
