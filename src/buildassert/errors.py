"""Error types raised by the assertion library."""

from __future__ import annotations


class AssertionFailure(AssertionError):
    """A verification did not hold.

    Attributes:
        message: The formatted failure message, without the description prefix.
        description: Optional description set with ``described_as``.
    """

    def __init__(self, message: str, description: str | None = None) -> None:
        self.message = message
        self.description = description
        if description:
            super().__init__(f"[{description}] {message}")
        else:
            super().__init__(message)


class UsageError(ValueError):
    """The assertion API itself was called incorrectly."""


class NarrowingError(UsageError):
    """An assert factory accepted a value but could not build an assertion for it."""


class MissingValueError(LookupError):
    """A provider was asked for its value while it has none."""
