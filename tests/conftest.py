"""Shared pytest fixtures for litestar-library tests."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING
from unittest.mock import MagicMock

import pytest

from litestar_library.base import BookRepository, MemberService, NotificationService

if TYPE_CHECKING:
    from litestar_library import LibraryService
    from litestar_library.backends.memory import (
        MemoryBookRepository,
        MemoryMemberService,
        MemoryNotificationService,
    )
    from litestar_library.types import Book


# ==================================================================================== #
# PYTEST CONFIGURATION
# ==================================================================================== #


def pytest_configure(config):
    """Configure pytest with custom settings and markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "litestar: Tests requiring Litestar")

    os.environ["PYTHONDONTWRITEBYTECODE"] = "1"


# ==================================================================================== #
# MOCK COLLABORATORS
# ==================================================================================== #


@pytest.fixture
def repo_mock() -> MagicMock:
    """
    Mock book repository.

    find_book() returns None unless a test configures it, so every title
    starts out unknown.
    """
    repo = MagicMock(spec=BookRepository)
    repo.find_book.return_value = None
    repo.get_all_books.return_value = []
    return repo


@pytest.fixture
def member_mock() -> MagicMock:
    """Mock member service. Members are invalid unless a test says otherwise."""
    members = MagicMock(spec=MemberService)
    members.is_valid_member.return_value = False
    return members


@pytest.fixture
def notifier_mock() -> MagicMock:
    """Mock notification service."""
    return MagicMock(spec=NotificationService)


@pytest.fixture
def service(repo_mock: MagicMock, member_mock: MagicMock, notifier_mock: MagicMock) -> LibraryService:
    """LibraryService wired to the mock collaborators."""
    from litestar_library.service import LibraryService

    return LibraryService(repo_mock, member_mock, notifier_mock)


# ==================================================================================== #
# IN-MEMORY COLLABORATORS
# ==================================================================================== #


@pytest.fixture
def memory_repository() -> MemoryBookRepository:
    """Fresh in-memory repository for each test."""
    from litestar_library.backends.memory import MemoryBookRepository

    return MemoryBookRepository()


@pytest.fixture
def memory_members() -> MemoryMemberService:
    """In-memory member service with members 1, 2 and 3 registered."""
    from litestar_library.backends.memory import MemoryMemberConfig, MemoryMemberService

    return MemoryMemberService(MemoryMemberConfig(members=frozenset({1, 2, 3})))


@pytest.fixture
def memory_notifier() -> MemoryNotificationService:
    """Fresh in-memory notifier for each test."""
    from litestar_library.backends.memory import MemoryNotificationService

    return MemoryNotificationService()


@pytest.fixture
def memory_service(
    memory_repository: MemoryBookRepository,
    memory_members: MemoryMemberService,
    memory_notifier: MemoryNotificationService,
) -> LibraryService:
    """LibraryService wired to in-memory collaborators."""
    from litestar_library.service import LibraryService

    return LibraryService(memory_repository, memory_members, memory_notifier)


# ==================================================================================== #
# TEST DATA
# ==================================================================================== #


@pytest.fixture
def mixed_books() -> list[Book]:
    """Books A (0 copies), B (1 copy) and C (3 copies), in that order."""
    from litestar_library.types import Book

    return [Book("A", 0), Book("B", 1), Book("C", 3)]
