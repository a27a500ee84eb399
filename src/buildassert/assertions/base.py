"""Base class shared by every assertion in the library.

Each assertion is parameterized by its own concrete type (``SELF``) so that
fluent methods declared on a base class still hand the caller's concrete
type back. Subclasses return ``self.myself`` from every check.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Generic, NoReturn, TypeVar, Union, cast

from buildassert.config import get_settings
from buildassert.errors import AssertionFailure, UsageError

logger = logging.getLogger(__name__)

SELF = TypeVar("SELF", bound="AbstractAssert[Any, Any]")
ACTUAL = TypeVar("ACTUAL")
T = TypeVar("T")


class Condition(Generic[T]):
    """A named predicate, used where a failure should name what was expected."""

    def __init__(self, predicate: Callable[[T], bool], description: str) -> None:
        self.predicate = predicate
        self.description = description

    def matches(self, value: T) -> bool:
        return bool(self.predicate(value))

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return f"Condition({self.description!r})"


Requirement = Union[Callable[[T], Any], Condition[T]]


def type_name(cls: type) -> str:
    """Render a type for a failure message."""
    if get_settings().qualified_type_names:
        return f"{cls.__module__}.{cls.__qualname__}"
    return cls.__qualname__


def expected_types_name(expected: type | tuple[type, ...]) -> str:
    if isinstance(expected, tuple):
        return " | ".join(type_name(t) for t in expected)
    return type_name(expected)


class AbstractAssert(Generic[SELF, ACTUAL]):
    """Holds the subject under test and the failure-reporting primitive."""

    def __init__(self, actual: ACTUAL | None) -> None:
        self._actual = actual
        self.myself: SELF = cast(SELF, self)
        self._description: str | None = None

    @property
    def actual(self) -> ACTUAL | None:
        return self._actual

    def described_as(self, description: str, *args: Any) -> SELF:
        """Prefix later failure messages with ``[description]``."""
        self._description = description % args if args else description
        return self.myself

    as_ = described_as

    def is_not_null(self) -> SELF:
        if self._actual is None:
            self.fail_with_message("Expecting actual not to be null")
        return self.myself

    def fail_with_message(self, template: str, *args: Any) -> NoReturn:
        """Format the message with ``%`` and raise an AssertionFailure."""
        message = template % args if args else template
        logger.debug(f"{type(self).__name__} failed: {message}")
        raise AssertionFailure(message, self._description)

    def _check_requirement(self, value: Any, requirement: Requirement[Any]) -> None:
        """Run a callback against value, or evaluate a Condition and fail if it does not hold."""
        if isinstance(requirement, Condition):
            if not requirement.matches(value):
                self.fail_with_message("Expecting actual '%s' to be %s", value, requirement)
        elif callable(requirement):
            requirement(value)
        else:
            raise UsageError(
                f"Requirement must be a callable or a Condition, got {type(requirement).__name__}"
            )

    def _inherit_description(self, other: AbstractAssert[Any, Any]) -> None:
        # Derived assertions keep reporting under the caller's description
        if self._description is not None and other._description is None:
            other._description = self._description

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._actual!r})"
