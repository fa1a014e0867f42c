"""Litestar plugin for library service integration."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from litestar import Request, Response
from litestar.di import Provide
from litestar.plugins import InitPluginProtocol
from litestar.status_codes import HTTP_400_BAD_REQUEST, HTTP_403_FORBIDDEN, HTTP_409_CONFLICT

from litestar_library.exceptions import BookValidationError, InvalidMemberError, LibraryError
from litestar_library.service import LibraryService  # noqa: TC001 - needed at runtime for DI

if TYPE_CHECKING:
    from litestar import Litestar
    from litestar.config.app import AppConfig

    from litestar_library.types import Book

__all__ = ["LibraryPlugin"]

logger = logging.getLogger(__name__)


def _book_validation_error_handler(_: Request[Any, Any, Any], exc: BookValidationError) -> Response[dict[str, str]]:
    """Convert BookValidationError to a 400 response."""
    return Response(
        content={"detail": str(exc), "field": exc.field},
        status_code=HTTP_400_BAD_REQUEST,
    )


def _invalid_member_handler(_: Request[Any, Any, Any], exc: InvalidMemberError) -> Response[dict[str, str]]:
    """Convert InvalidMemberError to a 403 response."""
    return Response(
        content={"detail": str(exc)},
        status_code=HTTP_403_FORBIDDEN,
    )


def _library_error_handler(_: Request[Any, Any, Any], exc: LibraryError) -> Response[dict[str, str]]:
    """Convert any other LibraryError, such as a full repository, to a 409 response."""
    return Response(
        content={"detail": str(exc)},
        status_code=HTTP_409_CONFLICT,
    )


class LibraryPlugin(InitPluginProtocol):
    """Litestar plugin for library service integration.

    Provides:
        - Dependency injection of the service and its collaborators
        - Translation of library errors into HTTP responses
        - Lifespan management (collaborator cleanup)

    Example:
        ```python
        from litestar import Litestar, get
        from litestar_library import Book, LibraryService
        from litestar_library.contrib.plugin import LibraryPlugin


        @get("/books/available")
        async def available(library_service: LibraryService) -> list[Book]:
            return library_service.get_available_books()


        app = Litestar(
            route_handlers=[available],
            plugins=[LibraryPlugin.from_memory(members={1, 2, 3})],
        )
        ```

        The plugin registers these dependencies:
        - `library_service`
        - `book_repository`
        - `member_service`
        - `notification_service`
    """

    __slots__ = ("service",)

    def __init__(self, service: LibraryService) -> None:
        """Initialize the LibraryPlugin.

        Args:
            service: The library service to inject into route handlers
        """
        self.service = service

    @classmethod
    def from_memory(
        cls,
        members: Iterable[int] = (),
        books: Iterable[Book] = (),
    ) -> LibraryPlugin:
        """Build a plugin around a service backed by in-memory collaborators.

        Args:
            members: Member identifiers that may borrow books
            books: Books to seed the repository with

        Returns:
            A plugin wrapping a fresh LibraryService
        """
        from litestar_library.backends.memory import (
            MemoryBookRepository,
            MemoryMemberConfig,
            MemoryMemberService,
            MemoryNotificationService,
        )

        service = LibraryService(
            MemoryBookRepository(books=books),
            MemoryMemberService(MemoryMemberConfig(members=frozenset(members))),
            MemoryNotificationService(),
        )
        return cls(service)

    @property
    def collaborators(self) -> dict[str, object]:
        """The service's collaborators keyed by dependency name."""
        return {
            "book_repository": self.service.repository,
            "member_service": self.service.members,
            "notification_service": self.service.notifier,
        }

    def on_app_init(self, app_config: AppConfig) -> AppConfig:
        """Register dependencies, exception handlers and shutdown hook.

        Args:
            app_config: The Litestar application configuration

        Returns:
            Modified application configuration

        Note:
            - Existing dependencies are preserved
            - Exception handlers already configured for the library errors are kept
        """
        dependencies = dict(app_config.dependencies or {})

        # sync_to_thread=False since we're just returning a reference, no blocking I/O
        dependencies["library_service"] = Provide(self._make_provider(self.service), sync_to_thread=False)
        for name, collaborator in self.collaborators.items():
            dependencies[name] = Provide(self._make_provider(collaborator), sync_to_thread=False)

        app_config.dependencies = dependencies

        exception_handlers = dict(app_config.exception_handlers or {})
        exception_handlers.setdefault(BookValidationError, _book_validation_error_handler)
        exception_handlers.setdefault(InvalidMemberError, _invalid_member_handler)
        exception_handlers.setdefault(LibraryError, _library_error_handler)
        app_config.exception_handlers = exception_handlers

        on_shutdown = list(app_config.on_shutdown or [])
        on_shutdown.append(self._shutdown_collaborators)
        app_config.on_shutdown = on_shutdown

        return app_config

    async def _shutdown_collaborators(self, _app: Litestar) -> None:
        """Shutdown handler that closes every collaborator exposing close().

        Both plain and async close() methods are supported.

        Errors during close() are logged so the remaining collaborators still
        get closed.

        Args:
            _app: The Litestar application instance (unused but required by signature)
        """
        for name, collaborator in self.collaborators.items():
            close = getattr(collaborator, "close", None)
            if close is None:
                continue
            try:
                result = close()
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.warning(
                    "Error closing %s: %s",
                    name,
                    e,
                )

    @staticmethod
    def _make_provider(value: Any) -> Callable[[], Any]:
        """Create a provider function for dependency injection.

        This factory method ensures proper closure binding for each value.
        """

        def provider() -> Any:
            return value

        return provider
