"""Stand-in values passed at the call site in place of a real argument."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from verify_that.matcher import AssertionMatcher

if TYPE_CHECKING:
    from verify_that.context import MatchContext
    from verify_that.registrar import ArgumentSpecification


class ArgumentPlaceholder:
    """Occupies an argument position of an expected call.

    ``unittest.mock`` compares expected arguments to recorded ones with
    ``==`` and renders expected calls with ``repr``; both are routed to the
    matcher, so the placeholder itself carries no value. The first comparison
    consumes the placeholder's specification from the match context it was
    registered with, if it is still pending there.
    """

    __slots__ = ("specification", "ctx")

    def __init__(self, specification: ArgumentSpecification, ctx: MatchContext):
        self.specification = specification
        self.ctx = ctx

    @property
    def matcher(self) -> AssertionMatcher:
        return self.specification.matcher

    @property
    def arg_type(self) -> Any:
        return self.specification.arg_type

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ArgumentPlaceholder):
            return other is self
        self.ctx.remove(self.specification)
        return self.specification.is_satisfied_by(other)

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    __hash__ = object.__hash__

    def __repr__(self) -> str:
        return str(self.matcher)

    __str__ = __repr__


def default_value(arg_type: type) -> Any:
    """Return the zero value of ``arg_type``, or None if it has none."""
    try:
        return arg_type()
    except Exception:
        return None
