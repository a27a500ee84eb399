"""Assertions over lazily evaluated providers.

A provider either holds one value or is empty, and finding out may require
computing the value. Each check reads the provider exactly once through
``get_or_none()`` and nothing is cached between checks, so a provider that
changes between two checks is observed as changed.

``map`` and ``flat_map`` do not touch the provider at all. They wrap it in a
composed provider that applies the transform only when the returned
assertion is itself checked.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar, overload

from buildassert.assertions.base import SELF, AbstractAssert, Requirement, expected_types_name, type_name
from buildassert.assertions.objects import ObjectAssert
from buildassert.errors import UsageError
from buildassert.model import Provider

if TYPE_CHECKING:
    from buildassert.assertions.factories import AssertFactory

logger = logging.getLogger(__name__)

V = TypeVar("V")
R = TypeVar("R")
A = TypeVar("A", bound=AbstractAssert[Any, Any])
P = TypeVar("P", bound=Provider[Any])


class MappedProvider(Provider[R], Generic[V, R]):
    """Applies transform to the source's value on every query.

    Empty when the source is empty or when transform returns None.
    """

    def __init__(self, source: Provider[V], transform: Callable[[V], R | None]) -> None:
        self._source = source
        self._transform = transform

    def get_or_none(self) -> R | None:
        value = self._source.get_or_none()
        if value is None:
            return None
        return self._transform(value)

    def __str__(self) -> str:
        return f"map({self._source})"


class FlatMappedProvider(Provider[R], Generic[V, R]):
    """Has exactly the presence and value of the provider that transform returns."""

    def __init__(self, source: Provider[V], transform: Callable[[V], Provider[R] | None]) -> None:
        self._source = source
        self._transform = transform

    def get_or_none(self) -> R | None:
        value = self._source.get_or_none()
        if value is None:
            return None
        inner = self._transform(value)
        if inner is None:
            return None
        if not isinstance(inner, Provider):
            raise UsageError(
                f"flat_map transform must return a Provider or None, got {type(inner).__name__}"
            )
        return inner.get_or_none()

    def __str__(self) -> str:
        return f"flatMap({self._source})"


class AbstractProviderAssert(AbstractAssert[SELF, P], Generic[SELF, V, P]):
    """Base for assertions whose subject is a Provider.

    ``V`` is the type of the provided value and ``P`` the provider type, so
    subclasses for specific providers (e.g. directory properties) keep their
    own return types across the shared checks.
    """

    def contains(self, expected_value: V) -> SELF:
        """Verify the provider holds a value equal to expected_value."""
        self.is_not_null()
        self._check_expected(expected_value)

        value = self._actual.get_or_none()
        if value is None:
            self.fail_with_message("Expecting provider to contain '%s' but was empty", expected_value)
        if expected_value != value:
            self.fail_with_message(
                "Expecting provider to contain '%s' but was '%s'", expected_value, value
            )
        return self.myself

    def has_value(self, expected_value: V) -> SELF:
        return self.contains(expected_value)

    def contains_same(self, expected_value: V) -> SELF:
        """Verify the provider holds expected_value itself, not merely an equal value."""
        self.is_not_null()
        self._check_expected(expected_value)

        value = self._actual.get_or_none()
        if value is None:
            self.fail_with_message("Expecting provider to contain '%s' but was empty", expected_value)
        if value is not expected_value:
            self.fail_with_message(
                "Expecting provider to contain value identical to '%s'", expected_value
            )
        return self.myself

    def contains_instance_of(self, expected_type: type | tuple[type, ...]) -> SELF:
        value = self._present_value()
        if not isinstance(value, expected_type):
            self.fail_with_message(
                "Expecting '%s' to contain an instance of '%s' but contained an instance of '%s'",
                type(self._actual).__name__,
                expected_types_name(expected_type),
                type_name(type(value)),
            )
        return self.myself

    def has_value_satisfying(self, requirement: Requirement[V]) -> SELF:
        """Hand the value to a callback, or check it against a Condition.

        Exceptions raised by a callback propagate unchanged.
        """
        value = self._present_value()
        self._check_requirement(value, requirement)
        return self.myself

    satisfies = has_value_satisfying

    def is_present(self) -> SELF:
        self._present_value()
        return self.myself

    def is_empty(self) -> SELF:
        self.is_not_null()
        if self._actual.get_or_none() is not None:
            self.fail_with_message("Expecting provider to be empty but contains '%s'", self._actual)
        return self.myself

    @overload
    def get(self) -> ObjectAssert[V]: ...

    @overload
    def get(self, factory: AssertFactory[Any, A]) -> A: ...

    def get(self, factory: AssertFactory[Any, A] | None = None) -> ObjectAssert[V] | A:
        """Assertion over the provided value, narrowed through factory when one is given.

        Fails if the provider is empty. With a factory, also fails if the value
        is not of the factory's type.
        """
        value = self._present_value()
        derived = ObjectAssert(value)
        self._inherit_description(derived)
        if factory is None:
            return derived
        return derived.as_instance_of(factory)

    def map(self, transform: Callable[[V], R | None]) -> ProviderAssert[R]:
        """Assert on the provider's value after transform, evaluated lazily."""
        self.is_not_null()
        logger.debug(f"Composing map over {self._actual}")
        derived = ProviderAssert(MappedProvider(self._actual, transform))
        self._inherit_description(derived)
        return derived

    def flat_map(self, transform: Callable[[V], Provider[R] | None]) -> ProviderAssert[R]:
        """Assert on the provider returned by transform, evaluated lazily."""
        self.is_not_null()
        logger.debug(f"Composing flatMap over {self._actual}")
        derived = ProviderAssert(FlatMappedProvider(self._actual, transform))
        self._inherit_description(derived)
        return derived

    def _present_value(self) -> V:
        self.is_not_null()
        value = self._actual.get_or_none()
        if value is None:
            self.fail_with_message("Expecting '%s' to contain a value, but it was empty", self._actual)
        return value

    @staticmethod
    def _check_expected(expected_value: Any) -> None:
        if expected_value is None:
            raise UsageError("The expected value must not be <None>.")


class ProviderAssert(AbstractProviderAssert["ProviderAssert[V]", V, Provider[V]], Generic[V]):
    @classmethod
    def assert_that(cls, provider: Provider[V] | None) -> ProviderAssert[V]:
        return cls(provider)
