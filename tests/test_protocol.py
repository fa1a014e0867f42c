"""Behavioural tests running LibraryService against the in-memory collaborators.

These tests check the lending rules end to end, with real collaborators
instead of mocks, so the repository, member service and notifier have to
agree with the service on how records are shared and saved.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from litestar_library.base import BookRepository, MemberService, NotificationService
from litestar_library.exceptions import BookValidationError, InvalidMemberError
from litestar_library.types import Book

if TYPE_CHECKING:
    from litestar_library import LibraryService
    from litestar_library.backends.memory import (
        MemoryBookRepository,
        MemoryMemberService,
        MemoryNotificationService,
    )


@pytest.mark.unit
class TestMemoryCollaboratorsSatisfyProtocols:
    """Test that the in-memory collaborators implement the protocols."""

    def test_protocols(
        self,
        memory_repository: MemoryBookRepository,
        memory_members: MemoryMemberService,
        memory_notifier: MemoryNotificationService,
    ) -> None:
        assert isinstance(memory_repository, BookRepository)
        assert isinstance(memory_members, MemberService)
        assert isinstance(memory_notifier, NotificationService)


@pytest.mark.unit
class TestLendingLifecycle:
    """Test add, borrow, return and listing with real collaborators."""

    def test_add_then_add_again(self, memory_service: LibraryService, memory_repository: MemoryBookRepository) -> None:
        """
        Test adding a title twice.

        Verifies:
        - The first call creates the record with the given copies
        - The second call adds to the same record
        """
        memory_service.add_book("Dune", 2)
        first = memory_repository.find_book("Dune")
        memory_service.add_book("Dune", 3)

        assert memory_repository.find_book("Dune") is first
        assert first == Book("Dune", 5)
        assert len(memory_repository) == 1

    def test_borrow_until_empty(
        self,
        memory_service: LibraryService,
        memory_repository: MemoryBookRepository,
        memory_notifier: MemoryNotificationService,
    ) -> None:
        """
        Test borrowing every copy of a title.

        Verifies:
        - Each borrow succeeds until the copies run out
        - The next borrow returns False and sends no notification
        - Copies never go negative
        """
        memory_service.add_book("Dune", 2)

        assert memory_service.borrow_book(1, "Dune") is True
        assert memory_service.borrow_book(2, "Dune") is True
        assert memory_service.borrow_book(3, "Dune") is False

        assert memory_repository.find_book("Dune").copies == 0
        assert [event.member_id for event in memory_notifier.events] == [1, 2]

    def test_return_makes_book_available_again(
        self,
        memory_service: LibraryService,
        memory_notifier: MemoryNotificationService,
    ) -> None:
        """Test that a returned copy shows up in the available list."""
        memory_service.add_book("Dune", 1)
        memory_service.borrow_book(1, "Dune")
        assert memory_service.get_available_books() == []

        assert memory_service.return_book(1, "Dune") is True

        assert memory_service.get_available_books() == [Book("Dune", 1)]
        assert [event.action for event in memory_notifier.events] == ["borrow", "return"]

    def test_return_unknown_title(
        self,
        memory_service: LibraryService,
        memory_repository: MemoryBookRepository,
        memory_notifier: MemoryNotificationService,
    ) -> None:
        """Test that returning an unknown title neither creates it nor notifies."""
        assert memory_service.return_book(1, "Unknown") is False

        assert memory_repository.get_all_books() == []
        assert memory_notifier.events == ()

    def test_invalid_member_cannot_borrow(
        self,
        memory_service: LibraryService,
        memory_repository: MemoryBookRepository,
        memory_notifier: MemoryNotificationService,
    ) -> None:
        """Test that an unregistered member is rejected and stock is untouched."""
        memory_service.add_book("Dune", 1)

        with pytest.raises(InvalidMemberError):
            memory_service.borrow_book(404, "Dune")

        assert memory_repository.find_book("Dune").copies == 1
        assert memory_notifier.events == ()

    def test_revoked_member_can_still_return(
        self,
        memory_service: LibraryService,
        memory_members: MemoryMemberService,
    ) -> None:
        """Test that returns do not depend on current membership."""
        memory_service.add_book("Dune", 1)
        memory_service.borrow_book(1, "Dune")
        memory_members.revoke(1)

        assert memory_service.return_book(1, "Dune") is True

    def test_invalid_add_leaves_repository_empty(
        self,
        memory_service: LibraryService,
        memory_repository: MemoryBookRepository,
    ) -> None:
        """Test that rejected add_book() calls store nothing."""
        with pytest.raises(BookValidationError):
            memory_service.add_book("", 2)
        with pytest.raises(BookValidationError):
            memory_service.add_book("Book", 0)

        assert memory_repository.get_all_books() == []

    def test_available_books_example(
        self,
        memory_service: LibraryService,
        memory_repository: MemoryBookRepository,
        mixed_books: list[Book],
    ) -> None:
        """Test the A/B/C example: only B and C are available, in order."""
        for book in mixed_books:
            memory_repository.save_book(book)

        available = memory_service.get_available_books()

        assert [book.title for book in available] == ["B", "C"]
        assert len(available) == 2

    def test_state_changes_are_logged_at_debug(
        self,
        memory_service: LibraryService,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Test that the service logs state changes at DEBUG level."""
        with caplog.at_level(logging.DEBUG, logger="litestar_library.service"):
            memory_service.add_book("Dune", 1)
            memory_service.borrow_book(1, "Dune")

        service_records = [r for r in caplog.records if r.name == "litestar_library.service"]
        assert len(service_records) == 2
        assert all(record.levelno == logging.DEBUG for record in service_records)
