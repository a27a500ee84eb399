"""Assertions over regular files and regular file properties."""

from __future__ import annotations

from buildassert.assertions.base import AbstractAssert
from buildassert.assertions.objects import PathAssert, StringAssert
from buildassert.assertions.provider import AbstractProviderAssert
from buildassert.model import RegularFile, RegularFileProperty


class RegularFileAssert(AbstractAssert["RegularFileAssert", RegularFile]):
    @classmethod
    def assert_that(cls, file: RegularFile | None) -> RegularFileAssert:
        return cls(file)

    def as_file(self) -> PathAssert:
        self.is_not_null()
        derived = PathAssert(self._actual.as_file())
        self._inherit_description(derived)
        return derived

    def as_string(self) -> StringAssert:
        self.is_not_null()
        derived = StringAssert(str(self._actual.as_file()))
        self._inherit_description(derived)
        return derived


class RegularFilePropertyAssert(
    AbstractProviderAssert["RegularFilePropertyAssert", RegularFile, RegularFileProperty]
):
    @classmethod
    def assert_that(cls, file_property: RegularFileProperty | None) -> RegularFilePropertyAssert:
        return cls(file_property)

    def get_regular_file(self) -> RegularFileAssert:
        from buildassert.assertions import factories

        return self.get(factories.REGULAR_FILE)

    def get_file(self) -> PathAssert:
        return self.get_regular_file().as_file()

    def get_string(self) -> StringAssert:
        return self.get_regular_file().as_string()
