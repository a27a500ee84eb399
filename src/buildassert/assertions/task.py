"""Assertions over tasks."""

from __future__ import annotations

from typing import Any

from buildassert.assertions.base import AbstractAssert
from buildassert.assertions.file_collection import FileCollectionAssert
from buildassert.model import Task


class TaskAssert(AbstractAssert["TaskAssert", Task]):
    @classmethod
    def assert_that(cls, task: Task | None) -> TaskAssert:
        return cls(task)

    def has_name(self, name: str) -> TaskAssert:
        self.is_not_null()
        if self._actual.name != name:
            self.fail_with_message("Expected task to have name '%s', but it was '%s'", name, self._actual.name)
        return self

    def has_description(self, description: str) -> TaskAssert:
        self.is_not_null()
        if description != self._actual.description:
            self.fail_with_message(
                "Expected task '%s' to have description '%s', but it was '%s'",
                self._actual.name,
                description,
                self._actual.description,
            )
        return self

    def has_group(self, group: str) -> TaskAssert:
        self.is_not_null()
        if group != self._actual.group:
            self.fail_with_message(
                "Expected task '%s' to belong to group '%s', but was '%s'",
                self._actual.name,
                group,
                self._actual.group,
            )
        return self

    def has_path(self, path: str) -> TaskAssert:
        self.is_not_null()
        if path != self._actual.path:
            self.fail_with_message(
                "Expected task '%s' to have path '%s', but was '%s'", self._actual.name, path, self._actual.path
            )
        return self

    def is_enabled(self) -> TaskAssert:
        self.is_not_null()
        if not self._actual.enabled:
            self.fail_with_message("Expected task '%s' to be enabled, but it was disabled", self._actual.name)
        return self

    def is_disabled(self) -> TaskAssert:
        self.is_not_null()
        if self._actual.enabled:
            self.fail_with_message("Expected task '%s' to be disabled, but it was enabled", self._actual.name)
        return self

    def has_property(self, property_name: str) -> TaskAssert:
        self.is_not_null()
        if not self._actual.has_property(property_name):
            self.fail_with_message(
                "Expected task '%s' to have property '%s', but it does not", self._actual.name, property_name
            )
        return self

    def has_property_value(self, property_name: str, property_value: Any) -> TaskAssert:
        self.has_property(property_name)
        if property_value != self._actual.get_property(property_name):
            self.fail_with_message(
                "Expected task '%s' to have property '%s' with value '%s', but is does not",
                self._actual.name,
                property_name,
                property_value,
            )
        return self

    def depends_on(self, dependency: Any, *dependencies: Any) -> TaskAssert:
        """Verify each dependency appears in the task's declared dependencies, in order."""
        self.is_not_null()
        declared = self._actual.depends_on
        for dep in (dependency, *dependencies):
            if dep not in declared:
                self.fail_with_message(
                    "Expected task '%s' to depend on '%s', but it does not", self._actual.name, dep
                )
        return self

    def has_inputs(self) -> TaskAssert:
        self.is_not_null()
        if not self._actual.inputs.has_inputs:
            self.fail_with_message("Expected task '%s' to have inputs, but it does not", self._actual.name)
        return self

    def get_input_files(self) -> FileCollectionAssert:
        self.has_inputs()
        derived = FileCollectionAssert(self._actual.inputs.files)
        self._inherit_description(derived)
        return derived

    def has_outputs(self) -> TaskAssert:
        self.is_not_null()
        if not self._actual.outputs.has_output:
            self.fail_with_message("Expected task '%s' to have outputs, but it does not", self._actual.name)
        return self

    def get_output_files(self) -> FileCollectionAssert:
        self.has_outputs()
        derived = FileCollectionAssert(self._actual.outputs.files)
        self._inherit_description(derived)
        return derived
