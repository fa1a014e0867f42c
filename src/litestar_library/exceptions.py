"""Exception hierarchy for litestar-library."""

from __future__ import annotations

__all__ = [
    "BookValidationError",
    "ConfigurationError",
    "InvalidMemberError",
    "LibraryError",
]


class LibraryError(Exception):
    """Base exception for all library-related errors.

    Services and collaborators raise exceptions derived from this class so
    callers can handle every library failure with a single except clause.
    """


class BookValidationError(LibraryError, ValueError):
    """Raised when a book operation receives invalid arguments.

    This typically occurs when:
    - The title is empty
    - The number of copies is not a positive integer

    Attributes:
        field: Name of the rejected argument ("title" or "copies")
        value: The rejected value
    """

    def __init__(self, field: str, value: object, reason: str) -> None:
        """Initialize BookValidationError.

        Args:
            field: Name of the rejected argument
            value: The rejected value
            reason: Human readable explanation
        """
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field} {value!r}: {reason}")


class InvalidMemberError(LibraryError):
    """Raised when an operation requires a valid member and the member service rejects it.

    Attributes:
        member_id: The member identifier that failed validation
    """

    def __init__(self, member_id: int) -> None:
        """Initialize InvalidMemberError.

        Args:
            member_id: The member identifier that failed validation
        """
        self.member_id = member_id
        super().__init__(f"Member {member_id} is not a valid member")


class ConfigurationError(LibraryError):
    """Raised when a collaborator configuration is invalid.

    This typically occurs when:
    - A capacity limit is negative
    - Configuration values are incompatible with each other
    """
