"""Soft assertion scope and the checks that report into it."""

from verify_that.assertions.expectation import Expectation, expect
from verify_that.assertions.scope import (
    ASSERTION_SCOPE,
    AssertionScope,
    current_scope,
    fail,
)

__all__ = [
    "ASSERTION_SCOPE",
    "AssertionScope",
    "Expectation",
    "current_scope",
    "expect",
    "fail",
]
