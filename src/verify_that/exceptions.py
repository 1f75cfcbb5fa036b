"""Errors raised by verify_that."""

from typing import Any

from verify_that.formatting import type_name


class VerifyThatError(Exception):
    """Base class for verify_that errors."""


class ArgumentTypeMismatchError(VerifyThatError, TypeError):
    """An argument handed to a matcher is not an instance of its declared type.

    Indicates a mismatch between ``arg_type`` given to :func:`verify_that.that`
    and the argument actually passed to the mocked call. It is a configuration
    error, never a failed match.
    """

    def __init__(self, expected: Any, actual: object):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Argument of type {type(actual).__name__!r} cannot be checked by a matcher "
            f"declared for {type_name(expected)!r}: {actual!r}"
        )


class NoPendingSpecificationError(VerifyThatError, LookupError):
    """The match context has no argument specification left to consume."""


class PlaceholderMisuseError(VerifyThatError):
    """A placeholder was used outside the call expression it was created for."""


class AssertionScopeError(AssertionError):
    """An assertion scope closed while still holding failures."""

    def __init__(self, failures: list[str]):
        self.failures = failures
        super().__init__("\n".join(failures))
