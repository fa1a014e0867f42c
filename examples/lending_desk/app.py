"""Lending desk example: a small HTTP API over LibraryService.

This example demonstrates:
- Injecting LibraryService into route handlers with LibraryPlugin
- Adding books and listing available ones
- Borrowing and returning copies
- Library errors turned into 400/403 responses by the plugin

Run with:
    uv run litestar --app examples.lending_desk.app:app run
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from litestar import Controller, Litestar, get, post

from litestar_library import Book, LendingEvent, LibraryService, MemoryNotificationService
from litestar_library.contrib.dto import BookDTO, LendingEventDTO
from litestar_library.contrib.plugin import LibraryPlugin

DEFAULT_MEMBERS = (1, 2, 3)


@dataclass
class BookCreate:
    """Request model for adding copies of a book."""

    title: str
    copies: int


@dataclass
class LendingResult:
    """Response model for borrow and return requests."""

    title: str
    success: bool


class BookController(Controller):
    """Catalogue endpoints."""

    path = "/books"

    @get("/available", return_dto=BookDTO)
    async def list_available(self, library_service: LibraryService) -> list[Book]:
        """List books with at least one copy on the shelf."""
        return library_service.get_available_books()

    @post("/")
    async def add_book(self, data: BookCreate, library_service: LibraryService) -> None:
        """Add copies of a book, creating it when needed."""
        library_service.add_book(data.title, data.copies)


class MemberController(Controller):
    """Borrow and return endpoints."""

    path = "/members/{member_id:int}"

    @post("/borrow/{title:str}")
    async def borrow(self, member_id: int, title: str, library_service: LibraryService) -> LendingResult:
        """Borrow one copy of a book."""
        return LendingResult(title=title, success=library_service.borrow_book(member_id, title))

    @post("/return/{title:str}")
    async def return_book(self, member_id: int, title: str, library_service: LibraryService) -> LendingResult:
        """Return one copy of a book."""
        return LendingResult(title=title, success=library_service.return_book(member_id, title))


@get("/events", return_dto=LendingEventDTO)
async def list_events(notification_service: MemoryNotificationService) -> list[LendingEvent]:
    """List recorded borrow and return events."""
    return list(notification_service.events)


def create_app(members: Iterable[int] = DEFAULT_MEMBERS, books: Iterable[Book] = ()) -> Litestar:
    """Create and configure the Litestar application.

    Args:
        members: Member identifiers allowed to borrow
        books: Books to seed the in-memory repository with

    Returns:
        Configured Litestar application
    """
    return Litestar(
        route_handlers=[BookController, MemberController, list_events],
        plugins=[LibraryPlugin.from_memory(members=members, books=books)],
    )


app = create_app(books=[Book("Dune", 2), Book("Emma", 1)])
