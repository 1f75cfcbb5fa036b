"""Public entry point: check a mock call argument with assertions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

from verify_that.context import MatchContext, get_match_context
from verify_that.matcher import AssertionMatcher
from verify_that.placeholder import ArgumentPlaceholder
from verify_that.registrar import enqueue_specification

T = TypeVar("T")


def that(
    assertion: Callable[[T | None], Any],
    arg_type: type[T] = object,  # type: ignore[assignment]
    *,
    ctx: MatchContext | None = None,
) -> T:
    """Check a mocked call's argument with assertions instead of equality.

    Registers one argument specification with the current match context and
    returns the placeholder to pass, directly, as the argument of the expected
    call. When the mock compares calls, ``assertion`` runs against the real
    argument; any failure makes the argument non-matching and its message is
    shown in the mock's "expected call" diagnostics.

    Args:
        assertion: Callback performing checks on the argument. It may raise
            (plain ``assert``) or record failures with ``expect``.
        arg_type: Declared type of the argument. Arguments of another type
            raise ``ArgumentTypeMismatchError`` when compared.
        ctx: Match context to register with. Defaults to the current one.

    Returns:
        A placeholder typed as ``T`` for static checkers.

    Example:
        >>> m = Mock()
        >>> m.some_method("Hello hello")
        >>> m.some_method.assert_called_with(
        ...     Verify.that(lambda s: expect(s).to_start_with("hello").and_.to_end_with("goodbye"), str)
        ... )
        AssertionError: expected call not found.
        Expected: mock.some_method("
        Expected string to start with
        "hello", but
        "Hello hello" differs near "Hel" (index 0).
        Expected string
        "Hello hello" to end with
        "goodbye".")
          Actual: mock.some_method('Hello hello')
    """
    ctx = ctx if ctx is not None else get_match_context()
    matcher: AssertionMatcher[T] = AssertionMatcher(assertion, arg_type)
    specification = enqueue_specification(arg_type, matcher, ctx=ctx)
    return cast(T, ArgumentPlaceholder(specification, ctx))


class Verify:
    """Namespace for :func:`that`, so call sites read ``Verify.that(...)``."""

    that = staticmethod(that)
