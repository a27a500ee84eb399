"""Assertions over directories and directory properties."""

from __future__ import annotations

from buildassert.assertions.base import AbstractAssert
from buildassert.assertions.file_collection import FileCollectionAssert
from buildassert.assertions.objects import PathAssert, StringAssert
from buildassert.assertions.provider import AbstractProviderAssert
from buildassert.model import Directory, DirectoryProperty


class DirectoryAssert(AbstractAssert["DirectoryAssert", Directory]):
    @classmethod
    def assert_that(cls, directory: Directory | None) -> DirectoryAssert:
        return cls(directory)

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

    def get_files(self) -> FileCollectionAssert:
        """Assertions over every file below the directory."""
        self.is_not_null()
        derived = FileCollectionAssert(self._actual.as_file_tree())
        self._inherit_description(derived)
        return derived


class DirectoryPropertyAssert(
    AbstractProviderAssert["DirectoryPropertyAssert", Directory, DirectoryProperty]
):
    @classmethod
    def assert_that(cls, directory_property: DirectoryProperty | None) -> DirectoryPropertyAssert:
        return cls(directory_property)

    def get_directory(self) -> DirectoryAssert:
        from buildassert.assertions import factories

        return self.get(factories.DIRECTORY)

    def get_file(self) -> PathAssert:
        return self.get_directory().as_file()

    def get_string(self) -> StringAssert:
        return self.get_directory().as_string()
