"""Tests for provider assertions."""

from pathlib import Path

import pytest

from buildassert import Condition, assert_that, factories
from buildassert.assertions import ObjectAssert, ProviderAssert, StringAssert
from buildassert.assertions.provider import FlatMappedProvider, MappedProvider
from buildassert.errors import AssertionFailure, MissingValueError, NarrowingError, UsageError
from buildassert.model import Provider
from tests.fakes import FakeConfiguration, FakeDirectory, FakeDirectoryProperty, FakeProvider


@pytest.fixture
def present() -> FakeProvider:
    return FakeProvider("value1", descriptor="property(str, fixed(value1))")


@pytest.fixture
def absent() -> FakeProvider:
    return FakeProvider(descriptor="property(str, undefined)")


# --- contains / has_value ---


def test_contains_pass(present):
    assert isinstance(assert_that(present).contains("value1"), ProviderAssert)


def test_contains_different_value(present):
    with pytest.raises(AssertionFailure) as exc_info:
        assert_that(present).contains("value2")
    assert str(exc_info.value) == "Expecting provider to contain 'value2' but was 'value1'"


def test_contains_empty(absent):
    with pytest.raises(AssertionFailure) as exc_info:
        assert_that(absent).contains("value1")
    assert str(exc_info.value) == "Expecting provider to contain 'value1' but was empty"


def test_messages_match_across_provider_kinds(tmp_path):
    directory = FakeDirectory(tmp_path)
    messages = []
    for subject in (FakeProvider(descriptor="p"), FakeDirectoryProperty(descriptor="p")):
        with pytest.raises(AssertionFailure) as exc_info:
            assert_that(subject).contains(directory)
        messages.append(str(exc_info.value))
    assert messages == [f"Expecting provider to contain '{tmp_path}' but was empty"] * 2


def test_contains_compares_by_equality():
    provider = FakeProvider(producer=lambda: {"a": "b", "c": "d"})
    assert_that(provider).contains({"a": "b", "c": "d"})


def test_contains_none_is_usage_error(present):
    with pytest.raises(UsageError, match="must not be <None>"):
        assert_that(present).contains(None)


def test_contains_none_is_not_an_assertion_failure(present):
    with pytest.raises(UsageError) as exc_info:
        assert_that(present).has_value(None)
    assert not isinstance(exc_info.value, AssertionError)


def test_has_value_is_alias(present, absent):
    assert_that(present).has_value("value1")
    with pytest.raises(AssertionFailure, match="to contain 'value2' but was 'value1'"):
        assert_that(present).has_value("value2")
    with pytest.raises(AssertionFailure, match="to contain 'value1' but was empty"):
        assert_that(absent).has_value("value1")


# --- contains_same ---


def test_contains_same():
    value = ["shared"]
    provider = FakeProvider(value)
    assert_that(provider).contains_same(value)

    with pytest.raises(AssertionFailure) as exc_info:
        assert_that(provider).contains_same(["shared"])
    assert str(exc_info.value) == "Expecting provider to contain value identical to '['shared']'"


def test_contains_same_empty(absent):
    with pytest.raises(AssertionFailure) as exc_info:
        assert_that(absent).contains_same(12345)
    assert str(exc_info.value) == "Expecting provider to contain '12345' but was empty"


def test_contains_same_none_is_usage_error(present):
    with pytest.raises(UsageError):
        assert_that(present).contains_same(None)


# --- contains_instance_of ---


def test_contains_instance_of(present):
    assert_that(present).contains_instance_of(str)
    assert_that(present).contains_instance_of((int, str))


def test_contains_instance_of_wrong_type(present):
    with pytest.raises(AssertionFailure) as exc_info:
        assert_that(present).contains_instance_of(int)
    assert str(exc_info.value) == (
        "Expecting 'FakeProvider' to contain an instance of 'builtins.int' "
        "but contained an instance of 'builtins.str'"
    )


def test_contains_instance_of_empty(absent):
    with pytest.raises(AssertionFailure) as exc_info:
        assert_that(absent).contains_instance_of(str)
    assert str(exc_info.value) == "Expecting 'property(str, undefined)' to contain a value, but it was empty"


# --- has_value_satisfying ---


def test_has_value_satisfying_callback(present):
    seen = []
    assert_that(present).has_value_satisfying(seen.append)
    assert seen == ["value1"]


def test_has_value_satisfying_callback_failure_propagates(present):
    def requirement(value):
        assert_that(value).is_equal_to("other")

    with pytest.raises(AssertionFailure, match="to be equal to 'other'"):
        assert_that(present).has_value_satisfying(requirement)


def test_has_value_satisfying_callback_not_called_when_empty(absent):
    seen = []
    with pytest.raises(AssertionFailure) as exc_info:
        assert_that(absent).has_value_satisfying(seen.append)
    assert seen == []
    assert str(exc_info.value) == "Expecting 'property(str, undefined)' to contain a value, but it was empty"


def test_has_value_satisfying_condition(present):
    assert_that(present).has_value_satisfying(Condition(lambda v: v.startswith("value"), "a value"))

    with pytest.raises(AssertionFailure) as exc_info:
        assert_that(present).satisfies(Condition(lambda v: v == "test", "testing"))
    assert str(exc_info.value) == "Expecting actual 'value1' to be testing"


def test_has_value_satisfying_rejects_other_requirements(present):
    with pytest.raises(UsageError):
        assert_that(present).has_value_satisfying("not callable")


# --- is_present / is_empty ---


def test_is_present(present):
    assert_that(present).is_present()


def test_is_present_empty(absent):
    with pytest.raises(AssertionFailure) as exc_info:
        assert_that(absent).is_present()
    assert str(exc_info.value) == "Expecting 'property(str, undefined)' to contain a value, but it was empty"


def test_is_empty(absent):
    assert_that(absent).is_empty()


def test_is_empty_with_value(present):
    with pytest.raises(AssertionFailure) as exc_info:
        assert_that(present).is_empty()
    assert str(exc_info.value) == "Expecting provider to be empty but contains 'property(str, fixed(value1))'"


@pytest.mark.parametrize("value", [None, "x", 0, "", False])
def test_exactly_one_of_present_and_empty_holds(value):
    provider = FakeProvider(value)
    outcomes = []
    for check in (ProviderAssert.is_present, ProviderAssert.is_empty):
        try:
            check(ProviderAssert(provider))
            outcomes.append(True)
        except AssertionFailure:
            outcomes.append(False)
    assert outcomes.count(True) == 1


def test_null_provider():
    with pytest.raises(AssertionFailure, match="Expecting actual not to be null"):
        ProviderAssert(None).is_present()
    with pytest.raises(AssertionFailure, match="Expecting actual not to be null"):
        ProviderAssert(None).map(str)


def test_each_check_reads_provider_once(present):
    assert_that(present).contains("value1")
    assert present.realizations == 1


def test_values_are_not_cached_between_checks():
    values = iter(["first", "second"])
    provider = FakeProvider(producer=lambda: next(values))
    check = assert_that(provider)
    check.contains("first")
    check.contains("second")


def test_realization_errors_propagate():
    def boom():
        raise RuntimeError("cannot compute")

    with pytest.raises(RuntimeError, match="cannot compute"):
        assert_that(FakeProvider(producer=boom)).is_present()


class CountingProvider(Provider[str]):
    """Host provider implementing only what Provider requires."""

    def __init__(self, value: str | None) -> None:
        self.value = value
        self.calls = 0

    def get_or_none(self) -> str | None:
        self.calls += 1
        return self.value


@pytest.mark.parametrize(
    "check",
    [
        lambda a: a.contains("v"),
        lambda a: a.contains_instance_of(str),
        lambda a: a.has_value_satisfying(lambda v: None),
        lambda a: a.is_present(),
        lambda a: a.get(),
        lambda a: a.map(str.upper).contains("V"),
    ],
)
def test_minimal_host_provider_is_realized_once_per_check(check):
    provider = CountingProvider("v")
    check(assert_that(provider))
    assert provider.calls == 1


def test_minimal_host_provider_derived_queries():
    provider = CountingProvider(None)
    assert provider.is_present() is False
    with pytest.raises(MissingValueError, match="has no value available"):
        provider.get()
    assert provider.calls == 2


def test_provider_requires_get_or_none():
    class Incomplete(Provider[str]):
        def is_present(self) -> bool:
            return True

        def get(self) -> str:
            return "v"

    with pytest.raises(TypeError):
        Incomplete()


# --- get ---


def test_get(present):
    result = assert_that(present).get()
    assert type(result) is ObjectAssert
    result.is_equal_to("value1")


def test_get_empty(absent):
    with pytest.raises(AssertionFailure) as exc_info:
        assert_that(absent).get()
    assert str(exc_info.value) == "Expecting 'property(str, undefined)' to contain a value, but it was empty"


def test_get_with_factory(present):
    result = assert_that(present).get(factories.STRING)
    assert isinstance(result, StringAssert)
    result.starts_with("value").has_length(6)


def test_get_with_factory_wrong_type(present):
    with pytest.raises(AssertionFailure) as exc_info:
        assert_that(present).get(factories.PROJECT)
    assert str(exc_info.value) == (
        "Expecting 'value1' to be an instance of 'buildassert.model.Project' "
        "but was an instance of 'builtins.str'"
    )


def test_get_with_factory_keeps_subject_identity():
    configuration = FakeConfiguration("implementation", files=["a.jar"])
    narrowed = assert_that(FakeProvider(configuration)).get(factories.CONFIGURATION)
    assert narrowed.actual is configuration
    narrowed.has_name("implementation").has_single_file()


def test_get_with_factory_empty(absent):
    with pytest.raises(AssertionFailure, match="to contain a value, but it was empty"):
        assert_that(absent).get(factories.STRING)


def test_get_with_broken_factory(present):
    from buildassert.assertions.factories import AssertFactory

    def explode(value):
        raise TypeError("bad constructor")

    with pytest.raises(NarrowingError, match="constructor failed"):
        assert_that(present).get(AssertFactory(str, explode))


def test_get_with_factory_returning_non_assertion(present):
    from buildassert.assertions.factories import AssertFactory

    with pytest.raises(NarrowingError, match="not an assertion"):
        assert_that(present).get(AssertFactory(str, len))


# --- map ---


def test_map(present):
    assert_that(present).map(str.upper).contains("VALUE1")


def test_map_of_empty_stays_empty(absent):
    calls = []

    def transform(value):
        calls.append(value)
        return value

    assert_that(absent).map(transform).is_empty()
    assert calls == []


def test_map_to_none_is_empty(present):
    assert_that(present).map(lambda v: None).is_empty()


def test_map_is_lazy(present):
    calls = []

    def transform(value):
        calls.append(value)
        return len(value)

    mapped = assert_that(present).map(transform)
    assert calls == []
    assert present.realizations == 0

    mapped.contains(6)
    assert calls == ["value1"]


def test_map_failure_uses_composed_descriptor(absent):
    with pytest.raises(AssertionFailure) as exc_info:
        assert_that(absent).map(str.upper).is_present()
    assert str(exc_info.value) == "Expecting 'map(property(str, undefined))' to contain a value, but it was empty"


def test_map_chain(present):
    (
        assert_that(present)
        .map(str.upper)
        .map(lambda v: v + "!")
        .contains("VALUE1!")
        .contains_instance_of(str)
    )


def test_map_get_with_factory():
    provider = FakeProvider("build/a.txt")
    assert_that(provider).map(Path).get(factories.PATH).has_name("a.txt").has_suffix(".txt")


# --- flat_map ---


def test_flat_map(present):
    inner = FakeProvider("inner")
    assert_that(present).flat_map(lambda v: inner).contains("inner")


def test_flat_map_to_empty_provider(present, absent):
    assert_that(present).flat_map(lambda v: absent).is_empty()


def test_flat_map_to_none(present):
    assert_that(present).flat_map(lambda v: None).is_empty()


def test_flat_map_of_empty_never_calls_transform(absent):
    calls = []
    assert_that(absent).flat_map(lambda v: calls.append(v)).is_empty()
    assert calls == []


def test_flat_map_does_not_wrap(present):
    inner = FakeProvider(["x"])
    flattened = assert_that(present).flat_map(lambda v: inner)
    flattened.contains(["x"]).contains_instance_of(list)


def test_flat_map_is_lazy(present):
    calls = []
    assert_that(present).flat_map(lambda v: calls.append(v) or FakeProvider(v))
    assert calls == []


def test_flat_map_requires_provider(present):
    with pytest.raises(UsageError, match="must return a Provider"):
        assert_that(present).flat_map(lambda v: v).is_present()


# --- composed providers ---


def test_mapped_provider_get_raises_when_empty(absent):
    mapped = MappedProvider(absent, str.upper)
    assert mapped.is_present() is False
    assert mapped.get_or_none() is None
    with pytest.raises(MissingValueError, match="map\\(property\\(str, undefined\\)\\)"):
        mapped.get()


def test_flat_mapped_provider_descriptor(present):
    flat = FlatMappedProvider(present, lambda v: FakeProvider(v * 2))
    assert str(flat) == "flatMap(property(str, fixed(value1)))"
    assert flat.get() == "value1value1"


# --- described_as ---


def test_description_prefix_carries_through_map(absent):
    with pytest.raises(AssertionFailure) as exc_info:
        assert_that(absent).described_as("version").map(str.upper).contains("1.0")
    assert str(exc_info.value) == "[version] Expecting provider to contain '1.0' but was empty"
    assert exc_info.value.message == "Expecting provider to contain '1.0' but was empty"
    assert exc_info.value.description == "version"
