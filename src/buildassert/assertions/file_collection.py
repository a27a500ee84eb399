"""Assertions over file collections."""

from __future__ import annotations

from pathlib import Path
from typing import TypeVar

from buildassert.assertions.base import SELF, AbstractAssert
from buildassert.assertions.objects import CollectionAssert, PathAssert
from buildassert.model import FileCollection

FC = TypeVar("FC", bound=FileCollection)


class AbstractFileCollectionAssert(AbstractAssert[SELF, FC]):
    """Checks shared by every assertion whose subject is a FileCollection.

    Membership is by path equality; the order of files is never significant.
    """

    def is_empty(self) -> SELF:
        self.is_not_null()
        if not self._actual.is_empty():
            self.fail_with_message("Expected file collection to be empty")
        return self.myself

    def is_not_empty(self) -> SELF:
        self.is_not_null()
        if self._actual.is_empty():
            self.fail_with_message("Expected file collection to not be empty")
        return self.myself

    def contains(self, file: Path | str) -> SELF:
        self.is_not_null()
        path = Path(file)
        if path not in self._actual:
            self.fail_with_message("Expected file collection to contain file '%s', but does not", path)
        return self.myself

    def has_single_file(self) -> SELF:
        self.is_not_null()
        num_files = len(self._actual.files)
        if num_files == 0:
            self.fail_with_message("Expected file collection to have a single file but is empty")
        if num_files > 1:
            self.fail_with_message("Expected file collection to have a single file, but has %d", num_files)
        return self.myself

    def as_files(self) -> CollectionAssert[Path]:
        """Switch to collection assertions over the files, e.g. ``contains_exactly_in_any_order``."""
        self.is_not_null()
        derived = CollectionAssert(self._actual.files)
        self._inherit_description(derived)
        return derived

    def as_file(self) -> PathAssert:
        """Switch to path assertions on the only file in the collection."""
        self.is_not_null()
        self.has_single_file()
        derived = PathAssert(self._actual.get_single_file())
        self._inherit_description(derived)
        return derived

    has_single_element = has_single_file
    as_elements = as_files
    as_single_element = as_file


class FileCollectionAssert(AbstractFileCollectionAssert["FileCollectionAssert", FileCollection]):
    @classmethod
    def assert_that(cls, file_collection: FileCollection | None) -> FileCollectionAssert:
        return cls(file_collection)
