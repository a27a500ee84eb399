"""Fluent assertion classes for build model objects."""

from buildassert.assertions.base import AbstractAssert, Condition
from buildassert.assertions.configuration import ConfigurationAssert
from buildassert.assertions.directory import DirectoryAssert, DirectoryPropertyAssert
from buildassert.assertions.factories import AssertFactory
from buildassert.assertions.file_collection import AbstractFileCollectionAssert, FileCollectionAssert
from buildassert.assertions.objects import (
    AbstractObjectAssert,
    CollectionAssert,
    ObjectAssert,
    PathAssert,
    StringAssert,
)
from buildassert.assertions.project import ProjectAssert
from buildassert.assertions.provider import (
    AbstractProviderAssert,
    FlatMappedProvider,
    MappedProvider,
    ProviderAssert,
)
from buildassert.assertions.regular_file import RegularFileAssert, RegularFilePropertyAssert
from buildassert.assertions.task import TaskAssert

__all__ = [
    "AbstractAssert",
    "AbstractFileCollectionAssert",
    "AbstractObjectAssert",
    "AbstractProviderAssert",
    "AssertFactory",
    "CollectionAssert",
    "Condition",
    "ConfigurationAssert",
    "DirectoryAssert",
    "DirectoryPropertyAssert",
    "FileCollectionAssert",
    "FlatMappedProvider",
    "MappedProvider",
    "ObjectAssert",
    "PathAssert",
    "ProjectAssert",
    "ProviderAssert",
    "RegularFileAssert",
    "RegularFilePropertyAssert",
    "StringAssert",
    "TaskAssert",
]
