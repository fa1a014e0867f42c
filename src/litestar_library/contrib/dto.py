"""Data Transfer Objects for library responses."""

from __future__ import annotations

from litestar.dto import DataclassDTO, DTOConfig

from litestar_library.types import Book, LendingEvent

__all__ = ["BookDTO", "LendingEventDTO"]


class BookDTO(DataclassDTO[Book]):
    """DTO for Book requests and responses.

    Example:
        Basic usage::

            from litestar import get
            from litestar_library import Book, LibraryService
            from litestar_library.contrib.dto import BookDTO


            @get("/books/available", return_dto=BookDTO)
            async def available(library_service: LibraryService) -> list[Book]:
                return library_service.get_available_books()

        Response will be::

            [{"title": "Dune", "copies": 2}]

        The derived `is_available` property is not serialized.
    """

    config = DTOConfig(
        exclude={"is_available"},
    )


class LendingEventDTO(DataclassDTO[LendingEvent]):
    """DTO for lending events.

    Hides the recording timestamp, which is an implementation detail of the
    notifier rather than part of the lending event itself.
    """

    config = DTOConfig(
        exclude={"occurred_at"},
    )
