"""General purpose assertions over plain values.

These are what ``get()``, ``as_file()``, ``as_files()`` and friends hand back
once a build object has been unwrapped to an ordinary Python value.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Collection, Iterable
from pathlib import Path
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from buildassert.assertions.base import (
    ACTUAL,
    SELF,
    AbstractAssert,
    Requirement,
    expected_types_name,
    type_name,
)
from buildassert.errors import NarrowingError, UsageError

if TYPE_CHECKING:
    from buildassert.assertions.factories import AssertFactory

logger = logging.getLogger(__name__)

T = TypeVar("T")
A = TypeVar("A", bound=AbstractAssert[Any, Any])


def render(values: Iterable[Any]) -> str:
    """Render a group of values in a stable order for failure messages."""
    items = list(values)
    try:
        items = sorted(items)
    except TypeError:
        pass
    return "[" + ", ".join(f"'{v}'" for v in items) + "]"


class AbstractObjectAssert(AbstractAssert[SELF, ACTUAL]):
    def is_equal_to(self, expected: Any) -> SELF:
        if self._actual != expected:
            self.fail_with_message(
                "Expecting actual '%s' to be equal to '%s'", self._actual, expected
            )
        return self.myself

    def is_not_equal_to(self, other: Any) -> SELF:
        if self._actual == other:
            self.fail_with_message(
                "Expecting actual '%s' not to be equal to '%s'", self._actual, other
            )
        return self.myself

    def is_same_as(self, expected: Any) -> SELF:
        if self._actual is not expected:
            self.fail_with_message(
                "Expecting actual '%s' to be the same instance as '%s'", self._actual, expected
            )
        return self.myself

    def is_not_same_as(self, other: Any) -> SELF:
        if self._actual is other:
            self.fail_with_message(
                "Expecting actual '%s' not to be the same instance as '%s'", self._actual, other
            )
        return self.myself

    def is_none(self) -> SELF:
        if self._actual is not None:
            self.fail_with_message("Expecting actual '%s' to be None", self._actual)
        return self.myself

    def is_not_none(self) -> SELF:
        return self.is_not_null()

    def is_instance_of(self, expected: type | tuple[type, ...]) -> SELF:
        self.is_not_null()
        if not isinstance(self._actual, expected):
            self.fail_with_message(
                "Expecting '%s' to be an instance of '%s' but was an instance of '%s'",
                self._actual,
                expected_types_name(expected),
                type_name(type(self._actual)),
            )
        return self.myself

    def is_not_instance_of(self, unexpected: type | tuple[type, ...]) -> SELF:
        self.is_not_null()
        if isinstance(self._actual, unexpected):
            self.fail_with_message(
                "Expecting '%s' not to be an instance of '%s'",
                self._actual,
                expected_types_name(unexpected),
            )
        return self.myself

    def satisfies(self, requirement: Requirement[Any]) -> SELF:
        """Hand the value to a callback, or check it against a Condition."""
        self.is_not_null()
        self._check_requirement(self._actual, requirement)
        return self.myself

    def matches(self, predicate: Callable[[Any], bool], description: str = "given predicate") -> SELF:
        self.is_not_null()
        if not predicate(self._actual):
            self.fail_with_message("Expecting actual '%s' to match %s", self._actual, description)
        return self.myself

    def extracting(self, extractor: Callable[[Any], Any]) -> ObjectAssert[Any]:
        self.is_not_null()
        derived = ObjectAssert(extractor(self._actual))
        self._inherit_description(derived)
        return derived

    def as_instance_of(self, factory: AssertFactory[Any, A]) -> A:
        """Narrow to the assertion type built by factory once the value's type checks out."""
        self.is_not_null()
        if not factory.check(self._actual):
            self.fail_with_message(
                "Expecting '%s' to be an instance of '%s' but was an instance of '%s'",
                self._actual,
                expected_types_name(factory.type),
                type_name(type(self._actual)),
            )
        narrowed = factory.construct(self._actual)
        if narrowed.actual is not self._actual:
            raise NarrowingError(
                f"{factory!r} built an assertion over a different object than it was given"
            )
        logger.debug(f"Narrowed {type(self).__name__} to {type(narrowed).__name__}")
        self._inherit_description(narrowed)
        return narrowed


class ObjectAssert(AbstractObjectAssert["ObjectAssert[T]", T], Generic[T]):
    @classmethod
    def assert_that(cls, actual: T | None) -> ObjectAssert[T]:
        return cls(actual)


class StringAssert(AbstractObjectAssert["StringAssert", str]):
    @classmethod
    def assert_that(cls, actual: str | None) -> StringAssert:
        return cls(actual)

    def is_empty(self) -> StringAssert:
        self.is_not_null()
        if self._actual != "":
            self.fail_with_message("Expecting '%s' to be empty", self._actual)
        return self

    def is_not_empty(self) -> StringAssert:
        self.is_not_null()
        if self._actual == "":
            self.fail_with_message("Expecting actual not to be empty")
        return self

    def contains(self, *values: str) -> StringAssert:
        self.is_not_null()
        for value in values:
            if value not in self._actual:
                self.fail_with_message("Expecting '%s' to contain '%s'", self._actual, value)
        return self

    def does_not_contain(self, *values: str) -> StringAssert:
        self.is_not_null()
        for value in values:
            if value in self._actual:
                self.fail_with_message("Expecting '%s' not to contain '%s'", self._actual, value)
        return self

    def starts_with(self, prefix: str) -> StringAssert:
        self.is_not_null()
        if not self._actual.startswith(prefix):
            self.fail_with_message("Expecting '%s' to start with '%s'", self._actual, prefix)
        return self

    def ends_with(self, suffix: str) -> StringAssert:
        self.is_not_null()
        if not self._actual.endswith(suffix):
            self.fail_with_message("Expecting '%s' to end with '%s'", self._actual, suffix)
        return self

    def matches_pattern(self, pattern: str | re.Pattern[str]) -> StringAssert:
        """The whole string must match pattern."""
        self.is_not_null()
        compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
        if compiled.fullmatch(self._actual) is None:
            self.fail_with_message(
                "Expecting '%s' to match pattern '%s'", self._actual, compiled.pattern
            )
        return self

    def has_length(self, length: int) -> StringAssert:
        self.is_not_null()
        if len(self._actual) != length:
            self.fail_with_message(
                "Expecting '%s' to have length %d but was %d", self._actual, length, len(self._actual)
            )
        return self


class PathAssert(AbstractObjectAssert["PathAssert", Path]):
    @classmethod
    def assert_that(cls, actual: Path | str | None) -> PathAssert:
        return cls(Path(actual) if isinstance(actual, str) else actual)

    def exists(self) -> PathAssert:
        self.is_not_null()
        if not self._actual.exists():
            self.fail_with_message("Expecting path '%s' to exist", self._actual)
        return self

    def does_not_exist(self) -> PathAssert:
        self.is_not_null()
        if self._actual.exists():
            self.fail_with_message("Expecting path '%s' not to exist", self._actual)
        return self

    def is_file(self) -> PathAssert:
        self.is_not_null()
        if not self._actual.is_file():
            self.fail_with_message("Expecting path '%s' to be an existing file", self._actual)
        return self

    def is_directory(self) -> PathAssert:
        self.is_not_null()
        if not self._actual.is_dir():
            self.fail_with_message("Expecting path '%s' to be an existing directory", self._actual)
        return self

    def has_name(self, name: str) -> PathAssert:
        self.is_not_null()
        if self._actual.name != name:
            self.fail_with_message(
                "Expecting path '%s' to have name '%s' but had '%s'", self._actual, name, self._actual.name
            )
        return self

    def has_suffix(self, suffix: str) -> PathAssert:
        self.is_not_null()
        if self._actual.suffix != suffix:
            self.fail_with_message(
                "Expecting path '%s' to have suffix '%s' but had '%s'",
                self._actual,
                suffix,
                self._actual.suffix,
            )
        return self

    def has_parent(self, parent: Path | str) -> PathAssert:
        self.is_not_null()
        if self._actual.parent != Path(parent):
            self.fail_with_message(
                "Expecting path '%s' to have parent '%s' but had '%s'",
                self._actual,
                parent,
                self._actual.parent,
            )
        return self

    def is_absolute(self) -> PathAssert:
        self.is_not_null()
        if not self._actual.is_absolute():
            self.fail_with_message("Expecting path '%s' to be absolute", self._actual)
        return self

    def is_relative(self) -> PathAssert:
        self.is_not_null()
        if self._actual.is_absolute():
            self.fail_with_message("Expecting path '%s' to be relative", self._actual)
        return self

    def as_string(self) -> StringAssert:
        self.is_not_null()
        derived = StringAssert(str(self._actual))
        self._inherit_description(derived)
        return derived


class CollectionAssert(AbstractObjectAssert["CollectionAssert[T]", Collection[T]], Generic[T]):
    """Order-insensitive checks over any sized collection."""

    @classmethod
    def assert_that(cls, actual: Collection[T] | None) -> CollectionAssert[T]:
        return cls(actual)

    def is_empty(self) -> CollectionAssert[T]:
        self.is_not_null()
        if len(self._actual) != 0:
            self.fail_with_message(
                "Expecting collection to be empty but had %d elements: %s",
                len(self._actual),
                render(self._actual),
            )
        return self

    def is_not_empty(self) -> CollectionAssert[T]:
        self.is_not_null()
        if len(self._actual) == 0:
            self.fail_with_message("Expecting collection not to be empty")
        return self

    def has_size(self, size: int) -> CollectionAssert[T]:
        self.is_not_null()
        if len(self._actual) != size:
            self.fail_with_message(
                "Expecting collection to have size %d but had %d", size, len(self._actual)
            )
        return self

    def contains(self, *values: T) -> CollectionAssert[T]:
        self.is_not_null()
        self._require_values(values)
        missing = [v for v in values if v not in self._actual]
        if missing:
            self.fail_with_message(
                "Expecting collection %s to contain %s but could not find %s",
                render(self._actual),
                render(values),
                render(missing),
            )
        return self

    def does_not_contain(self, *values: T) -> CollectionAssert[T]:
        self.is_not_null()
        self._require_values(values)
        found = [v for v in values if v in self._actual]
        if found:
            self.fail_with_message(
                "Expecting collection %s not to contain %s but found %s",
                render(self._actual),
                render(values),
                render(found),
            )
        return self

    def contains_exactly_in_any_order(self, *values: T) -> CollectionAssert[T]:
        """Same elements with the same multiplicity, ignoring order."""
        self.is_not_null()
        not_found = list(values)
        not_expected = []
        for element in self._actual:
            if element in not_found:
                not_found.remove(element)
            else:
                not_expected.append(element)
        if not_found or not_expected:
            self.fail_with_message(
                "Expecting collection %s to contain exactly in any order %s "
                "but elements not found: %s and elements not expected: %s",
                render(self._actual),
                render(values),
                render(not_found),
                render(not_expected),
            )
        return self

    def contains_only(self, *values: T) -> CollectionAssert[T]:
        """Every value is present and nothing else is, duplicates allowed."""
        self.is_not_null()
        self._require_values(values)
        not_found = [v for v in values if v not in self._actual]
        not_expected = [e for e in self._actual if e not in values]
        if not_found or not_expected:
            self.fail_with_message(
                "Expecting collection %s to contain only %s "
                "but elements not found: %s and elements not expected: %s",
                render(self._actual),
                render(values),
                render(not_found),
                render(not_expected),
            )
        return self

    def contains_any_of(self, *values: T) -> CollectionAssert[T]:
        self.is_not_null()
        self._require_values(values)
        if not any(v in self._actual for v in values):
            self.fail_with_message(
                "Expecting collection %s to contain at least one of %s",
                render(self._actual),
                render(values),
            )
        return self

    def all_satisfy(self, requirement: Requirement[T]) -> CollectionAssert[T]:
        self.is_not_null()
        for element in self._actual:
            self._check_requirement(element, requirement)
        return self

    def any_satisfy(self, requirement: Requirement[T]) -> CollectionAssert[T]:
        self.is_not_null()
        for element in self._actual:
            try:
                self._check_requirement(element, requirement)
            except AssertionError:
                continue
            return self
        self.fail_with_message(
            "Expecting any element of %s to satisfy the given requirement",
            render(self._actual),
        )

    @staticmethod
    def _require_values(values: tuple[Any, ...]) -> None:
        if not values:
            raise UsageError("At least one value must be given")
