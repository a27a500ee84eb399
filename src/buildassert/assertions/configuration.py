"""Assertions over dependency configurations."""

from __future__ import annotations

from buildassert.assertions.file_collection import AbstractFileCollectionAssert
from buildassert.model import Configuration


class ConfigurationAssert(AbstractFileCollectionAssert["ConfigurationAssert", Configuration]):
    """A Configuration is also a file collection, so the file checks apply as well."""

    @classmethod
    def assert_that(cls, configuration: Configuration | None) -> ConfigurationAssert:
        return cls(configuration)

    def has_name(self, name: str) -> ConfigurationAssert:
        self.is_not_null()
        if name != self._actual.name:
            self.fail_with_message(
                "Expected configuration name to be '%s', but was '%s'", name, self._actual.name
            )
        return self

    def has_description(self, description: str) -> ConfigurationAssert:
        self.is_not_null()
        if description != self._actual.description:
            self.fail_with_message(
                "Expected configuration '%s' description to be '%s', but was '%s'",
                self._actual.name,
                description,
                self._actual.description,
            )
        return self

    def can_be_consumed(self) -> ConfigurationAssert:
        self.is_not_null()
        if not self._actual.can_be_consumed:
            self.fail_with_message(
                "Expected configuration '%s' can be consumed by other projects, but it cannot",
                self._actual.name,
            )
        return self

    def can_be_declared(self) -> ConfigurationAssert:
        self.is_not_null()
        if not self._actual.can_be_declared:
            self.fail_with_message(
                "Expected dependencies can be declared on configuration '%s', but they cannot",
                self._actual.name,
            )
        return self

    def can_be_resolved(self) -> ConfigurationAssert:
        self.is_not_null()
        if not self._actual.can_be_resolved:
            self.fail_with_message(
                "Expected configuration '%s' can be resolved, but it cannot", self._actual.name
            )
        return self

    def is_transitive(self) -> ConfigurationAssert:
        self.is_not_null()
        if not self._actual.transitive:
            self.fail_with_message(
                "Expected configuration '%s' to be transitive, but it is not", self._actual.name
            )
        return self

    def is_not_transitive(self) -> ConfigurationAssert:
        self.is_not_null()
        if self._actual.transitive:
            self.fail_with_message(
                "Expected configuration '%s' not to be transitive, but it is", self._actual.name
            )
        return self
