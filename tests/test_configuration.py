"""Tests for configuration assertions."""

from pathlib import Path

import pytest

from buildassert import assert_that
from buildassert.assertions import ConfigurationAssert
from buildassert.errors import AssertionFailure
from tests.fakes import FakeConfiguration


@pytest.fixture
def runtime() -> FakeConfiguration:
    return FakeConfiguration(
        "runtimeClasspath",
        files=["libs/guava.jar", "libs/slf4j.jar"],
        description="Runtime classpath of source set 'main'.",
        can_be_consumed=False,
        can_be_declared=False,
        can_be_resolved=True,
        transitive=True,
    )


@pytest.fixture
def api() -> FakeConfiguration:
    return FakeConfiguration("api", can_be_resolved=False, transitive=False)


def test_entry_point_prefers_configuration_over_file_collection(runtime):
    assert isinstance(assert_that(runtime), ConfigurationAssert)


def test_has_name(runtime):
    assert_that(runtime).has_name("runtimeClasspath")
    with pytest.raises(AssertionFailure) as exc_info:
        assert_that(runtime).has_name("api")
    assert str(exc_info.value) == "Expected configuration name to be 'api', but was 'runtimeClasspath'"


def test_has_description(runtime):
    assert_that(runtime).has_description("Runtime classpath of source set 'main'.")
    with pytest.raises(AssertionFailure) as exc_info:
        assert_that(runtime).has_description("Compile classpath")
    assert str(exc_info.value) == (
        "Expected configuration 'runtimeClasspath' description to be 'Compile classpath', "
        "but was 'Runtime classpath of source set 'main'.'"
    )


def test_can_be_consumed(runtime, api):
    assert_that(api).can_be_consumed()
    with pytest.raises(AssertionFailure) as exc_info:
        assert_that(runtime).can_be_consumed()
    assert str(exc_info.value) == (
        "Expected configuration 'runtimeClasspath' can be consumed by other projects, but it cannot"
    )


def test_can_be_declared(runtime, api):
    assert_that(api).can_be_declared()
    with pytest.raises(AssertionFailure) as exc_info:
        assert_that(runtime).can_be_declared()
    assert str(exc_info.value) == (
        "Expected dependencies can be declared on configuration 'runtimeClasspath', but they cannot"
    )


def test_can_be_resolved(runtime, api):
    assert_that(runtime).can_be_resolved()
    with pytest.raises(AssertionFailure) as exc_info:
        assert_that(api).can_be_resolved()
    assert str(exc_info.value) == "Expected configuration 'api' can be resolved, but it cannot"


def test_is_transitive(runtime, api):
    assert_that(runtime).is_transitive()
    with pytest.raises(AssertionFailure) as exc_info:
        assert_that(api).is_transitive()
    assert str(exc_info.value) == "Expected configuration 'api' to be transitive, but it is not"


def test_is_not_transitive(runtime, api):
    assert_that(api).is_not_transitive()
    with pytest.raises(AssertionFailure) as exc_info:
        assert_that(runtime).is_not_transitive()
    assert str(exc_info.value) == "Expected configuration 'runtimeClasspath' not to be transitive, but it is"


def test_file_checks_keep_configuration_type(runtime):
    result = (
        assert_that(runtime)
        .is_not_empty()
        .contains(Path("libs/guava.jar"))
        .has_name("runtimeClasspath")
        .can_be_resolved()
    )
    assert isinstance(result, ConfigurationAssert)


def test_file_checks_messages(api, runtime):
    assert_that(api).is_empty()
    with pytest.raises(AssertionFailure, match="Expected file collection to have a single file, but has 2"):
        assert_that(runtime).has_single_file()
