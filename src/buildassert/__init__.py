"""Fluent assertions for build model objects."""

from buildassert.assertions import factories
from buildassert.assertions.base import Condition
from buildassert.config import AssertionSettings, configure, load_settings
from buildassert.entry import assert_that
from buildassert.errors import AssertionFailure, MissingValueError, NarrowingError, UsageError

__all__ = [
    "AssertionFailure",
    "AssertionSettings",
    "Condition",
    "MissingValueError",
    "NarrowingError",
    "UsageError",
    "assert_that",
    "configure",
    "factories",
    "load_settings",
]
