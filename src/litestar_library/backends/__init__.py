"""Collaborator backends for litestar-library."""

from __future__ import annotations

from litestar_library.backends.memory import (
    MemoryBookRepository,
    MemoryMemberConfig,
    MemoryMemberService,
    MemoryNotificationConfig,
    MemoryNotificationService,
    MemoryRepositoryConfig,
)

__all__ = (
    "MemoryBookRepository",
    "MemoryMemberConfig",
    "MemoryMemberService",
    "MemoryNotificationConfig",
    "MemoryNotificationService",
    "MemoryRepositoryConfig",
)
