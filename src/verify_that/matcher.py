"""Argument matcher that runs an assertion callback against the real argument."""

from __future__ import annotations

import logging
import types
from asyncio import CancelledError
from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel, Field

from verify_that.assertions import AssertionScope
from verify_that.config import get_settings
from verify_that.exceptions import ArgumentTypeMismatchError
from verify_that.formatting import format_argument, type_name

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Raised by the interpreter or the event loop, never by a failed check.
PROPAGATED_EXCEPTIONS = (KeyboardInterrupt, SystemExit, GeneratorExit, CancelledError)


def checkable_type(arg_type: Any) -> type | tuple[type, ...] | None:
    """Reduce a type annotation to something ``isinstance`` accepts.

    Parameterized generics reduce to their origin class (``list[int]`` to
    ``list``) and unions to a tuple of their members. Returns None when the
    annotation cannot be checked at runtime (``Any``, type variables,
    ``Literal`` and other special forms), in which case any argument passes.
    """
    if arg_type is Any:
        return None
    origin = get_origin(arg_type)
    if origin is Union or origin is types.UnionType:
        members: list[type] = []
        for member in get_args(arg_type):
            checked = checkable_type(member)
            if checked is None:
                return None
            members.extend(checked if isinstance(checked, tuple) else (checked,))
        return tuple(members)
    if origin is not None:
        arg_type = origin
    return arg_type if isinstance(arg_type, type) else None


class MatchEvaluation(BaseModel):
    """Outcome of running a matcher once.

    Attributes
    ----------
    passed
        Whether the argument satisfied the assertion.
    failures
        Failure messages in the order they were produced.
    candidate
        The argument the matcher was run against.
    """

    model_config = {"arbitrary_types_allowed": True}

    passed: bool
    failures: list[str] = Field(default_factory=list)
    candidate: Any = None

    @property
    def candidate_repr(self) -> str:
        return format_argument(self.candidate)

    def __bool__(self) -> bool:
        return self.passed


class AssertionMatcher(Generic[T]):
    """Predicate over an argument, built from an assertion callback.

    The callback performs checks and returns nothing. Failures it raises and
    failures it records softly in the :class:`AssertionScope` opened around it
    both turn the match into ``False``; the failure text is kept for the
    mock's "expected call" diagnostics.

    Parameters
    ----------
    assertion : Callable[[T | None], Any]
        Callback performing checks on the argument.
    arg_type : type[T]
        Declared type of the argument. Defaults to ``object``. Unions and
        parameterized generics are checked against their runtime classes;
        ``Any`` and other special forms accept every argument.
    """

    def __init__(self, assertion: Callable[[T | None], Any], arg_type: type[T] = object):  # type: ignore[assignment]
        self.assertion = assertion
        self.arg_type = arg_type
        self._checked_type = checkable_type(arg_type)
        self.evaluations = 0
        self.last_evaluation: MatchEvaluation | None = None
        self._all_failures = ""

    @property
    def failure_text(self) -> str:
        """Failure text from the most recent evaluation, empty if it passed or never ran."""
        return self._all_failures

    def is_satisfied_by_object(self, argument: object) -> bool:
        """Type-erased entry point used by the mock's argument comparison.

        Raises
        ------
        ArgumentTypeMismatchError
            If ``argument`` is neither None nor an instance of ``arg_type``
            and strict type checking is enabled.
        """
        if (
            argument is not None
            and self._checked_type is not None
            and get_settings().strict_types
            and not isinstance(argument, self._checked_type)
        ):
            raise ArgumentTypeMismatchError(self.arg_type, argument)
        return self.is_satisfied_by(argument)  # type: ignore[arg-type]

    def is_satisfied_by(self, argument: T | None) -> bool:
        self._all_failures = ""
        self.evaluations += 1

        with AssertionScope() as scope:
            try:
                self.assertion(argument)
            except PROPAGATED_EXCEPTIONS:
                raise
            except BaseException as exc:
                failures = scope.discard()
                self._all_failures = (
                    self._aggregate_failures(failures) if failures else str(exc) or type(exc).__name__
                )
                return self._record(argument, passed=False, failures=failures or [self._all_failures])

            failures = scope.discard()

        if not failures:
            return self._record(argument, passed=True, failures=[])

        self._all_failures = self._aggregate_failures(failures)
        return self._record(argument, passed=False, failures=failures)

    def _aggregate_failures(self, failures: Iterable[str]) -> str:
        text = self._all_failures
        for failure in failures:
            text = text + "\n" + failure
        return text

    def _record(self, argument: T | None, *, passed: bool, failures: list[str]) -> bool:
        self.last_evaluation = MatchEvaluation(
            passed=passed,
            failures=failures,
            candidate=argument,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Matcher for %s %s %s",
                type_name(self.arg_type),
                "accepted" if passed else "rejected",
                self.last_evaluation.candidate_repr,
            )
        return passed

    def __str__(self) -> str:
        if get_settings().quote_failures:
            return format_argument(self._all_failures)
        return self._all_failures

    def __repr__(self) -> str:
        return str(self)
