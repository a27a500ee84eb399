"""Read-only surface of the build model that the assertions inspect.

Host integrations subclass these to expose their objects. Only queries are
declared here; nothing in the library creates or mutates build objects.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path
from typing import Any, Generic, TypeVar

from buildassert.errors import MissingValueError

V = TypeVar("V")


class Provider(ABC, Generic[V]):
    """A lazily computed container holding at most one value.

    ``get_or_none`` is the only method a host has to implement. Each call
    realizes the value at most once, and every other query goes through it.
    """

    @abstractmethod
    def get_or_none(self) -> V | None:
        """Realize the value, or return None when absent."""
        ...

    def is_present(self) -> bool:
        return self.get_or_none() is not None

    def get(self) -> V:
        value = self.get_or_none()
        if value is None:
            raise MissingValueError(f"Cannot query the value of {self} because it has no value available.")
        return value


class DirectoryProperty(Provider["Directory"]):
    """Provider whose value is a Directory."""


class RegularFileProperty(Provider["RegularFile"]):
    """Provider whose value is a RegularFile."""


class FileCollection(ABC):
    """An unordered set of files."""

    @property
    @abstractmethod
    def files(self) -> frozenset[Path]:
        """The files currently in the collection."""
        ...

    def is_empty(self) -> bool:
        return not self.files

    def __contains__(self, item: object) -> bool:
        return item in self.files

    def __iter__(self) -> Iterator[Path]:
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)

    def get_single_file(self) -> Path:
        files = self.files
        if len(files) != 1:
            raise MissingValueError(f"Expected exactly one file but found {len(files)}")
        return next(iter(files))


class Configuration(FileCollection):
    """A named, resolvable group of dependencies."""

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def description(self) -> str | None: ...

    @property
    @abstractmethod
    def can_be_consumed(self) -> bool: ...

    @property
    @abstractmethod
    def can_be_declared(self) -> bool: ...

    @property
    @abstractmethod
    def can_be_resolved(self) -> bool: ...

    @property
    @abstractmethod
    def transitive(self) -> bool: ...


class RegularFile(ABC):
    @abstractmethod
    def as_file(self) -> Path: ...


class Directory(ABC):
    @abstractmethod
    def as_file(self) -> Path: ...

    @abstractmethod
    def as_file_tree(self) -> FileCollection:
        """All files below this directory."""
        ...


class TaskInputs(ABC):
    @property
    @abstractmethod
    def has_inputs(self) -> bool: ...

    @property
    @abstractmethod
    def files(self) -> FileCollection: ...


class TaskOutputs(ABC):
    @property
    @abstractmethod
    def has_output(self) -> bool: ...

    @property
    @abstractmethod
    def files(self) -> FileCollection: ...


class Reporting(ABC):
    """Marker for tasks that produce reports."""

    @property
    @abstractmethod
    def reports(self) -> Any: ...


class Task(ABC):
    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def description(self) -> str | None: ...

    @property
    @abstractmethod
    def group(self) -> str | None: ...

    @property
    @abstractmethod
    def path(self) -> str: ...

    @property
    @abstractmethod
    def enabled(self) -> bool: ...

    @property
    @abstractmethod
    def depends_on(self) -> set[Any]:
        """Dependencies as declared, e.g. task names or task objects."""
        ...

    @property
    @abstractmethod
    def inputs(self) -> TaskInputs: ...

    @property
    @abstractmethod
    def outputs(self) -> TaskOutputs: ...

    @abstractmethod
    def has_property(self, name: str) -> bool: ...

    @abstractmethod
    def get_property(self, name: str) -> Any: ...


class Project(ABC):
    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def find_extension(self, name: str) -> Any | None: ...

    @abstractmethod
    def find_extension_by_type(self, type_: type) -> Any | None: ...

    @abstractmethod
    def find_configuration(self, name: str) -> Configuration | None: ...

    @abstractmethod
    def find_plugin(self, plugin_id: str) -> Any | None: ...

    def has_plugin(self, plugin_id: str) -> bool:
        return self.find_plugin(plugin_id) is not None

    @abstractmethod
    def find_task(self, name: str) -> Task | None: ...

    @abstractmethod
    def file(self, path: str | Path) -> Path:
        """Resolve a path relative to the project directory."""
        ...

    @property
    @abstractmethod
    def build_directory(self) -> Path: ...

    @abstractmethod
    def has_property(self, name: str) -> bool: ...

    @abstractmethod
    def get_property(self, name: str) -> Any: ...
