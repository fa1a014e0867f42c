"""Dependency injection utilities for the library service."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from litestar_library.service import LibraryService  # noqa: TC001 - needed at runtime for DI

__all__ = ["LibraryServiceDependency", "provide_library_service"]


# Type alias for library service dependency injection
LibraryServiceDependency: TypeAlias = "LibraryService"
"""Type alias for library service injection in route handlers.

Example:
    ```python
    from litestar import post
    from litestar_library.contrib.dependencies import LibraryServiceDependency

    @post("/members/{member_id:int}/borrow/{title:str}")
    async def borrow(member_id: int, title: str, library_service: LibraryServiceDependency) -> bool:
        return library_service.borrow_book(member_id, title)
    ```
"""


def provide_library_service(service: LibraryService) -> Callable[[], LibraryService]:
    """Create a dependency provider function for a library service.

    Use this to register the service by hand when not using LibraryPlugin.

    Args:
        service: The library service to provide

    Returns:
        A callable that returns the service for dependency injection

    Example:
        ```python
        from litestar import Litestar
        from litestar.di import Provide
        from litestar_library.contrib.dependencies import provide_library_service

        app = Litestar(
            route_handlers=[...],
            dependencies={
                "library_service": Provide(provide_library_service(service), sync_to_thread=False),
            },
        )
        ```
    """

    def _provider() -> LibraryService:
        return service

    return _provider
