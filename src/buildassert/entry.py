"""Single entry point choosing the assertion class for a subject's runtime type."""

from __future__ import annotations

from functools import singledispatch
from pathlib import Path
from typing import Any

from buildassert.assertions.base import AbstractAssert
from buildassert.assertions.configuration import ConfigurationAssert
from buildassert.assertions.directory import DirectoryAssert, DirectoryPropertyAssert
from buildassert.assertions.file_collection import FileCollectionAssert
from buildassert.assertions.objects import CollectionAssert, ObjectAssert, PathAssert, StringAssert
from buildassert.assertions.project import ProjectAssert
from buildassert.assertions.provider import ProviderAssert
from buildassert.assertions.regular_file import RegularFileAssert, RegularFilePropertyAssert
from buildassert.assertions.task import TaskAssert
from buildassert.model import (
    Configuration,
    Directory,
    DirectoryProperty,
    FileCollection,
    Project,
    Provider,
    RegularFile,
    RegularFileProperty,
    Task,
)


@singledispatch
def assert_that(actual: Any) -> AbstractAssert[Any, Any]:
    """Start a chain of assertions on actual.

    The most specific registered type wins, so a Configuration gets
    ConfigurationAssert rather than FileCollectionAssert. Anything not
    registered, None included, gets an ObjectAssert.
    """
    return ObjectAssert(actual)


_DISPATCH: list[tuple[type, type[AbstractAssert[Any, Any]]]] = [
    (Project, ProjectAssert),
    (Task, TaskAssert),
    (Configuration, ConfigurationAssert),
    (FileCollection, FileCollectionAssert),
    (DirectoryProperty, DirectoryPropertyAssert),
    (RegularFileProperty, RegularFilePropertyAssert),
    (Provider, ProviderAssert),
    (Directory, DirectoryAssert),
    (RegularFile, RegularFileAssert),
    (str, StringAssert),
    (Path, PathAssert),
    (set, CollectionAssert),
    (frozenset, CollectionAssert),
    (list, CollectionAssert),
    (tuple, CollectionAssert),
]

for _subject_type, _assert_type in _DISPATCH:
    assert_that.register(_subject_type, _assert_type)
