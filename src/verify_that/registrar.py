"""Registration of deferred argument checks with the current match context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from verify_that.context import MatchContext, get_match_context
from verify_that.formatting import type_name


if TYPE_CHECKING:
    from verify_that.matcher import AssertionMatcher


@dataclass(frozen=True, slots=True, eq=False)
class ArgumentSpecification:
    """A deferred check bound to one argument position.

    Attributes
    ----------
    arg_type
        Declared type of the argument at that position.
    matcher
        Predicate evaluated against the real argument during call matching.
    """

    arg_type: Any
    matcher: AssertionMatcher

    def is_satisfied_by(self, argument: object) -> bool:
        return self.matcher.is_satisfied_by_object(argument)

    def __str__(self) -> str:
        return f"ArgumentSpecification({type_name(self.arg_type)})"


def enqueue_specification(
    arg_type: Any,
    matcher: AssertionMatcher,
    ctx: MatchContext | None = None,
) -> ArgumentSpecification:
    """Register a specification for the next argument position.

    Parameters
    ----------
    arg_type
        Declared type of the argument.
    matcher
        Predicate to run against the argument.
    ctx
        Match context to register with. Defaults to the current one.
    """
    specification = ArgumentSpecification(arg_type=arg_type, matcher=matcher)
    (ctx if ctx is not None else get_match_context()).enqueue_specification(specification)
    return specification


def dequeue_specification(ctx: MatchContext | None = None) -> ArgumentSpecification:
    return (ctx if ctx is not None else get_match_context()).dequeue_specification()
