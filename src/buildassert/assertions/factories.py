"""Factories that narrow a generically typed value to a specific assertion.

An ``AssertFactory`` pairs a runtime type check with the constructor of the
assertion to build once the check passes. Pass one to ``get(factory)`` on a
provider assertion or to ``as_instance_of(factory)`` on an object assertion::

    assert_that(provider).get(factories.CONFIGURATION).is_transitive()
"""

from __future__ import annotations

from collections.abc import Callable, Collection
from pathlib import Path
from typing import Any, Generic, TypeVar

from buildassert.assertions.base import AbstractAssert, expected_types_name
from buildassert.assertions.configuration import ConfigurationAssert
from buildassert.assertions.directory import DirectoryAssert
from buildassert.assertions.file_collection import FileCollectionAssert
from buildassert.assertions.objects import CollectionAssert, ObjectAssert, PathAssert, StringAssert
from buildassert.assertions.project import ProjectAssert
from buildassert.assertions.provider import ProviderAssert
from buildassert.assertions.regular_file import RegularFileAssert
from buildassert.assertions.task import TaskAssert
from buildassert.errors import NarrowingError
from buildassert.model import Configuration, Directory, FileCollection, Project, Provider, RegularFile, Task

T = TypeVar("T")
A = TypeVar("A", bound=AbstractAssert[Any, Any])


class AssertFactory(Generic[T, A]):
    """A (type check, constructor) pair; the check is the only gate before construction."""

    def __init__(self, type_: type[T] | tuple[type, ...], constructor: Callable[[T], A]) -> None:
        self.type = type_
        self.constructor = constructor

    def check(self, value: Any) -> bool:
        return isinstance(value, self.type)

    def construct(self, value: T) -> A:
        if not self.check(value):
            raise NarrowingError(
                f"{self!r} cannot build an assertion for a {type(value).__name__}; check it first"
            )
        try:
            result = self.constructor(value)
        except Exception as e:
            raise NarrowingError(
                f"{self!r} accepted a {type(value).__name__} but its constructor failed: {e}"
            ) from e
        if not isinstance(result, AbstractAssert):
            raise NarrowingError(
                f"{self!r} constructor returned {type(result).__name__}, not an assertion"
            )
        return result

    def __repr__(self) -> str:
        return f"AssertFactory({expected_types_name(self.type)})"


CONFIGURATION: AssertFactory[Configuration, ConfigurationAssert] = AssertFactory(
    Configuration, ConfigurationAssert
)
DIRECTORY: AssertFactory[Directory, DirectoryAssert] = AssertFactory(Directory, DirectoryAssert)
FILE_COLLECTION: AssertFactory[FileCollection, FileCollectionAssert] = AssertFactory(
    FileCollection, FileCollectionAssert
)
PROJECT: AssertFactory[Project, ProjectAssert] = AssertFactory(Project, ProjectAssert)
REGULAR_FILE: AssertFactory[RegularFile, RegularFileAssert] = AssertFactory(
    RegularFile, RegularFileAssert
)
TASK: AssertFactory[Task, TaskAssert] = AssertFactory(Task, TaskAssert)
PROVIDER: AssertFactory[Provider[Any], ProviderAssert[Any]] = AssertFactory(Provider, ProviderAssert)
STRING: AssertFactory[str, StringAssert] = AssertFactory(str, StringAssert)
PATH: AssertFactory[Path, PathAssert] = AssertFactory(Path, PathAssert)
COLLECTION: AssertFactory[Collection[Any], CollectionAssert[Any]] = AssertFactory(
    Collection, CollectionAssert
)
OBJECT: AssertFactory[Any, ObjectAssert[Any]] = AssertFactory(object, ObjectAssert)
