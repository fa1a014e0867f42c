"""litestar-library - Book lending service with pluggable collaborators."""

from __future__ import annotations

from litestar_library.__metadata__ import __project__, __version__
from litestar_library.backends import (
    MemoryBookRepository,
    MemoryMemberConfig,
    MemoryMemberService,
    MemoryNotificationConfig,
    MemoryNotificationService,
    MemoryRepositoryConfig,
)
from litestar_library.base import (
    BaseBookRepository,
    BaseMemberService,
    BaseNotificationService,
    BookRepository,
    MemberService,
    NotificationService,
)
from litestar_library.exceptions import (
    BookValidationError,
    ConfigurationError,
    InvalidMemberError,
    LibraryError,
)
from litestar_library.service import LibraryService
from litestar_library.types import Book, LendingAction, LendingEvent

__all__ = (
    # Metadata
    "__project__",
    "__version__",
    # Service
    "LibraryService",
    # Protocols and base classes
    "BaseBookRepository",
    "BaseMemberService",
    "BaseNotificationService",
    "BookRepository",
    "MemberService",
    "NotificationService",
    # Backends
    "MemoryBookRepository",
    "MemoryMemberConfig",
    "MemoryMemberService",
    "MemoryNotificationConfig",
    "MemoryNotificationService",
    "MemoryRepositoryConfig",
    # Exceptions
    "BookValidationError",
    "ConfigurationError",
    "InvalidMemberError",
    "LibraryError",
    # Types
    "Book",
    "LendingAction",
    "LendingEvent",
)
