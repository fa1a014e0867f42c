"""Library lending service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from litestar_library.exceptions import BookValidationError, InvalidMemberError
from litestar_library.types import Book

if TYPE_CHECKING:
    from litestar_library.base import BookRepository, MemberService, NotificationService

__all__ = ("LibraryService",)

logger = logging.getLogger(__name__)


class LibraryService:
    """Business logic for adding, lending and listing books.

    The service holds no state of its own. Book records live in the
    repository; the service fetches a record, adjusts its copy count and saves
    the same object back.

    Example:
        >>> service = LibraryService(MemoryBookRepository(), members, notifier)
        >>> service.add_book("Dune", 2)
        >>> service.borrow_book(1, "Dune")
        True
        >>> [book.title for book in service.get_available_books()]
        ['Dune']
    """

    __slots__ = ("_members", "_notifier", "_repository")

    def __init__(
        self,
        repository: BookRepository,
        members: MemberService,
        notifier: NotificationService,
    ) -> None:
        """Initialize LibraryService.

        Args:
            repository: Store used to look up and persist books
            members: Validator consulted before a book is lent
            notifier: Receives borrow and return events
        """
        self._repository = repository
        self._members = members
        self._notifier = notifier

    @property
    def repository(self) -> BookRepository:
        return self._repository

    @property
    def members(self) -> MemberService:
        return self._members

    @property
    def notifier(self) -> NotificationService:
        return self._notifier

    def add_book(self, title: str, copies: int) -> None:
        """Add copies of a title, creating the book if it is not known yet.

        Args:
            title: Title of the book (must not be empty)
            copies: Number of copies to add (must be a positive integer)

        Raises:
            BookValidationError: If the title is empty or copies is not positive.
                Nothing is looked up or saved in that case.
        """
        if not isinstance(title, str) or not title:
            raise BookValidationError("title", title, "title must not be empty")
        if isinstance(copies, bool) or not isinstance(copies, int) or copies <= 0:
            raise BookValidationError("copies", copies, "copies must be a positive integer")

        book = self._repository.find_book(title)
        if book is None:
            book = Book(title=title, copies=copies)
            logger.debug("Creating book %r with %d copies", title, copies)
        else:
            book.copies += copies
            logger.debug("Added %d copies to %r (now %d)", copies, title, book.copies)

        self._repository.save_book(book)

    def borrow_book(self, member_id: int, title: str) -> bool:
        """Lend one copy of a title to a member.

        Args:
            member_id: Member borrowing the book
            title: Title to borrow

        Returns:
            True if a copy was lent, False if the title is unknown or has no
            copies left

        Raises:
            InvalidMemberError: If the member service rejects the member. This
                is checked before the book is looked up.
        """
        if not self._members.is_valid_member(member_id):
            raise InvalidMemberError(member_id)

        book = self._repository.find_book(title)
        if book is None or book.copies <= 0:
            return False

        book.copies -= 1
        self._repository.save_book(book)
        self._notifier.notify_borrow(member_id, title)
        logger.debug("Member %s borrowed %r (%d left)", member_id, title, book.copies)
        return True

    def return_book(self, member_id: int, title: str) -> bool:
        """Take back one copy of a title.

        The member is not validated here, unlike borrow_book().

        Args:
            member_id: Member returning the book
            title: Title being returned

        Returns:
            True if the copy was put back, False if the title is unknown
        """
        book = self._repository.find_book(title)
        if book is None:
            return False

        book.copies += 1
        self._repository.save_book(book)
        self._notifier.notify_return(member_id, title)
        logger.debug("Member %s returned %r (%d on shelf)", member_id, title, book.copies)
        return True

    def get_available_books(self) -> list[Book]:
        """List the books that have at least one copy on the shelf.

        Returns:
            Books with copies > 0, in the repository's order
        """
        return [book for book in self._repository.get_all_books() if book.copies > 0]
