"""Chainable checks that report into the active assertion scope."""

from __future__ import annotations

from collections.abc import Callable, Sized
from typing import Any

from verify_that.assertions.scope import fail
from verify_that.formatting import format_argument, type_name


def _differs_near(actual: str, expected: str) -> int:
    for index, (a, e) in enumerate(zip(actual, expected)):
        if a != e:
            return index
    return min(len(actual), len(expected))


class Expectation:
    """Checks against a single value.

    Every check records its failure through :func:`~verify_that.assertions.fail`,
    so inside an :class:`~verify_that.assertions.AssertionScope` all failing
    checks of a chain are collected, and outside one the first failure raises
    ``AssertionError``.

    Parameters
    ----------
    value : Any
        The value under test.

    Examples
    --------
    >>> expect(10).to_be_greater_than(5).and_.to_be_less_than(20)  # passes
    >>> expect("Hello hello").to_start_with("Hello").and_.to_end_with("hello")  # passes
    """

    def __init__(self, value: Any):
        self.value = value

    @property
    def and_(self) -> Expectation:
        return self

    def _check(self, passed: bool, message: str) -> Expectation:
        if not passed:
            fail(message)
        return self

    def to_be(self, expected: Any) -> Expectation:
        """Check equality with ``expected``.

        Parameters
        ----------
        expected : Any
            The value the subject should equal.

        Returns
        -------
        Expectation
            This expectation, for chaining.
        """
        return self._check(
            self.value == expected,
            f"Expected value to be {format_argument(expected)}, but found {format_argument(self.value)}.",
        )

    def not_to_be(self, unexpected: Any) -> Expectation:
        return self._check(
            self.value != unexpected,
            f"Did not expect value to be {format_argument(unexpected)}.",
        )

    def to_be_none(self) -> Expectation:
        return self._check(
            self.value is None,
            f"Expected value to be None, but found {format_argument(self.value)}.",
        )

    def to_be_instance_of(self, expected_type: type) -> Expectation:
        return self._check(
            isinstance(self.value, expected_type),
            f"Expected value to be of type {type_name(expected_type)}, "
            f"but found {type(self.value).__name__}.",
        )

    def to_be_greater_than(self, bound: Any) -> Expectation:
        """Check that the value is strictly greater than ``bound``."""
        passed = self.value is not None and self.value > bound
        return self._check(
            passed,
            f"Expected value to be greater than {format_argument(bound)}, "
            f"but found {format_argument(self.value)}.",
        )

    def to_be_less_than(self, bound: Any) -> Expectation:
        """Check that the value is strictly less than ``bound``."""
        passed = self.value is not None and self.value < bound
        return self._check(
            passed,
            f"Expected value to be less than {format_argument(bound)}, "
            f"but found {format_argument(self.value)}.",
        )

    def to_start_with(self, prefix: str) -> Expectation:
        """Check that a string value starts with ``prefix``.

        The failure message points at the first differing character.

        Parameters
        ----------
        prefix : str
            Expected leading text.

        Returns
        -------
        Expectation
            This expectation, for chaining.
        """
        if not isinstance(self.value, str):
            return self._check(
                False,
                f"Expected string to start with {format_argument(prefix)}, "
                f"but found {format_argument(self.value)}.",
            )
        if self.value.startswith(prefix):
            return self
        index = _differs_near(self.value, prefix)
        near = self.value[index:index + 3]
        return self._check(
            False,
            f"Expected string to start with\n{format_argument(prefix)}, but\n"
            f"{format_argument(self.value)} differs near {format_argument(near)} (index {index}).",
        )

    def to_end_with(self, suffix: str) -> Expectation:
        passed = isinstance(self.value, str) and self.value.endswith(suffix)
        return self._check(
            passed,
            f"Expected string\n{format_argument(self.value)} to end with\n{format_argument(suffix)}.",
        )

    def to_contain(self, item: Any) -> Expectation:
        """Check membership of ``item`` (substring for strings)."""
        try:
            passed = item in self.value
        except TypeError:
            passed = False
        return self._check(
            passed,
            f"Expected {format_argument(self.value)} to contain {format_argument(item)}.",
        )

    def to_have_length(self, length: int) -> Expectation:
        if not isinstance(self.value, Sized):
            return self._check(
                False,
                f"Expected value to have length {length}, but {format_argument(self.value)} has no length.",
            )
        return self._check(
            len(self.value) == length,
            f"Expected value to have length {length}, but found {len(self.value)}: "
            f"{format_argument(self.value)}.",
        )

    def to_satisfy(self, condition: Callable[[Any], bool], description: str | None = None) -> Expectation:
        """Check the value with an arbitrary boolean ``condition``.

        Parameters
        ----------
        condition : Callable[[Any], bool]
            Predicate over the value.
        description : str or None, optional
            Human-readable name of the condition for the failure message.
            Defaults to the callable's name.
        """
        label = description or getattr(condition, "__name__", repr(condition))
        return self._check(
            bool(condition(self.value)),
            f"Expected {format_argument(self.value)} to satisfy {label}.",
        )


def expect(value: Any) -> Expectation:
    """Start a chain of checks against ``value``."""
    return Expectation(value)
