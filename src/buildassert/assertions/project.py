"""Assertions over projects.

Checks that take several names look them up in order and fail on the first
name that does not match, so the failure always names a single offender.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from buildassert.assertions.base import AbstractAssert, Requirement, expected_types_name, type_name
from buildassert.assertions.objects import PathAssert
from buildassert.errors import UsageError
from buildassert.model import Project, Reporting

_UNSET: Any = object()


def _require_names(names: tuple[str, ...], what: str) -> None:
    if not names:
        raise UsageError(f"At least one {what} must be given")


class ProjectAssert(AbstractAssert["ProjectAssert", Project]):
    @classmethod
    def assert_that(cls, project: Project | None) -> ProjectAssert:
        return cls(project)

    # Extensions

    def has_extension(self, *extension_names: str) -> ProjectAssert:
        self.is_not_null()
        _require_names(extension_names, "extension name")
        for extension_name in extension_names:
            if self._actual.find_extension(extension_name) is None:
                self.fail_with_message(
                    "Project '%s' does not contain the extension '%s'", self._actual.name, extension_name
                )
        return self

    def does_not_have_extension(self, *extension_names: str) -> ProjectAssert:
        self.is_not_null()
        _require_names(extension_names, "extension name")
        for extension_name in extension_names:
            if self._actual.find_extension(extension_name) is not None:
                self.fail_with_message(
                    "Project '%s' should not contain the extension '%s'", self._actual.name, extension_name
                )
        return self

    def has_extension_with_type(self, extension_name: str, extension_type: type) -> ProjectAssert:
        self.is_not_null()
        extension = self._actual.find_extension(extension_name)
        if extension is None:
            self.fail_with_message(
                "Project '%s' does not contain the extension '%s'", self._actual.name, extension_name
            )
        if not isinstance(extension, extension_type):
            self.fail_with_message(
                "Expected extension '%s' to be an instance of '%s' but is '%s'",
                extension_name,
                expected_types_name(extension_type),
                type_name(type(extension)),
            )
        return self

    def has_extension_of_type(self, extension_type: type) -> ProjectAssert:
        self.is_not_null()
        if self._actual.find_extension_by_type(extension_type) is None:
            self.fail_with_message(
                "Project '%s' does not contain an extension of type '%s'",
                self._actual.name,
                expected_types_name(extension_type),
            )
        return self

    def has_extension_satisfying(self, extension_name: str, requirement: Requirement[Any]) -> ProjectAssert:
        self.has_extension(extension_name)
        self._check_requirement(self._actual.find_extension(extension_name), requirement)
        return self

    # Configurations

    def has_configuration(self, *configuration_names: str) -> ProjectAssert:
        self.is_not_null()
        _require_names(configuration_names, "configuration name")
        for configuration_name in configuration_names:
            if self._actual.find_configuration(configuration_name) is None:
                self.fail_with_message(
                    "Project '%s' does not contain the configuration '%s'",
                    self._actual.name,
                    configuration_name,
                )
        return self

    def does_not_have_configuration(self, *configuration_names: str) -> ProjectAssert:
        self.is_not_null()
        _require_names(configuration_names, "configuration name")
        for configuration_name in configuration_names:
            if self._actual.find_configuration(configuration_name) is not None:
                self.fail_with_message(
                    "Project '%s' should not contain the configuration '%s'",
                    self._actual.name,
                    configuration_name,
                )
        return self

    def has_configuration_satisfying(
        self, configuration_name: str, requirement: Requirement[Any]
    ) -> ProjectAssert:
        self.has_configuration(configuration_name)
        self._check_requirement(self._actual.find_configuration(configuration_name), requirement)
        return self

    # Plugins

    def has_plugin(self, *plugin_ids: str) -> ProjectAssert:
        self.is_not_null()
        _require_names(plugin_ids, "plugin id")
        for plugin_id in plugin_ids:
            if self._actual.find_plugin(plugin_id) is None:
                self.fail_with_message(
                    "Project '%s' does not contain the plugin '%s'", self._actual.name, plugin_id
                )
        return self

    def does_not_have_plugin(self, *plugin_ids: str) -> ProjectAssert:
        self.is_not_null()
        _require_names(plugin_ids, "plugin id")
        for plugin_id in plugin_ids:
            if self._actual.has_plugin(plugin_id):
                self.fail_with_message(
                    "Project '%s' should not contain the plugin '%s'", self._actual.name, plugin_id
                )
        return self

    # Tasks

    def has_task(self, *task_names: str) -> ProjectAssert:
        self.is_not_null()
        _require_names(task_names, "task name")
        for task_name in task_names:
            if self._actual.find_task(task_name) is None:
                self.fail_with_message(
                    "Project '%s' does not contain the task '%s'", self._actual.name, task_name
                )
        return self

    def does_not_have_task(self, *task_names: str) -> ProjectAssert:
        self.is_not_null()
        _require_names(task_names, "task name")
        for task_name in task_names:
            if self._actual.find_task(task_name) is not None:
                self.fail_with_message(
                    "Project '%s' should not contain the task '%s'", self._actual.name, task_name
                )
        return self

    def has_task_with_type(self, task_name: str, task_type: type) -> ProjectAssert:
        self.is_not_null()
        task = self._actual.find_task(task_name)
        if task is None:
            self.fail_with_message(
                "Project '%s' does not contain the task '%s'", self._actual.name, task_name
            )
        if not isinstance(task, task_type):
            self.fail_with_message(
                "Expected task '%s' to be an instance of '%s' but is '%s'",
                task_name,
                expected_types_name(task_type),
                type_name(type(task)),
            )
        return self

    def has_task_with_reports(self, task_name: str) -> ProjectAssert:
        self.is_not_null()
        task = self._actual.find_task(task_name)
        if task is None:
            self.fail_with_message(
                "Project '%s' does not contain the task '%s'", self._actual.name, task_name
            )
        if not isinstance(task, Reporting):
            self.fail_with_message("Expected task '%s' to implement 'Reporting' but does not", task_name)
        return self

    def has_task_satisfying(self, task_name: str, requirement: Requirement[Any]) -> ProjectAssert:
        self.has_task(task_name)
        self._check_requirement(self._actual.find_task(task_name), requirement)
        return self

    # Files

    def has_project_file(self, pathname: str | Path) -> ProjectAssert:
        self.is_not_null()
        self._path_assert(self._actual.file(pathname)).is_file()
        return self

    def has_project_directory(self, pathname: str | Path) -> ProjectAssert:
        self.is_not_null()
        self._path_assert(self._actual.file(pathname)).is_directory()
        return self

    def has_build_file(self, pathname: str | Path) -> ProjectAssert:
        self.is_not_null()
        self._path_assert(self._actual.build_directory / pathname).is_file()
        return self

    def has_build_directory(self, pathname: str | Path) -> ProjectAssert:
        self.is_not_null()
        self._path_assert(self._actual.build_directory / pathname).is_directory()
        return self

    def _path_assert(self, path: Path) -> PathAssert:
        derived = PathAssert(path)
        self._inherit_description(derived)
        return derived

    # Properties

    def has_property(self, property_name: str, property_value: Any = _UNSET) -> ProjectAssert:
        """Verify the property exists and, when property_value is given, equals it."""
        self.is_not_null()
        if not self._actual.has_property(property_name):
            self.fail_with_message(
                "Project '%s' does not contain a property named '%s'", self._actual.name, property_name
            )
        if property_value is _UNSET:
            return self

        actual_value = self._actual.get_property(property_name)
        if property_value != actual_value:
            self.fail_with_message(
                "Project '%s' property '%s' expected value '%s' but was '%s'",
                self._actual.name,
                property_name,
                property_value,
                actual_value,
            )
        return self

    def does_not_have_property(self, property_name: str, property_value: Any = _UNSET) -> ProjectAssert:
        """Verify the property is missing or, when property_value is given, does not equal it."""
        self.is_not_null()
        if property_value is _UNSET:
            if self._actual.has_property(property_name):
                self.fail_with_message(
                    "Project '%s' should not contain a property named '%s'", self._actual.name, property_name
                )
            return self

        if (
            self._actual.has_property(property_name)
            and property_value == self._actual.get_property(property_name)
        ):
            self.fail_with_message(
                "Project '%s' property '%s' should not equal '%s'",
                self._actual.name,
                property_name,
                property_value,
            )
        return self
