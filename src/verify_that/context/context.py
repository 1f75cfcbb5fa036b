from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from verify_that.config import get_settings
from verify_that.exceptions import NoPendingSpecificationError


if TYPE_CHECKING:
    from verify_that.registrar import ArgumentSpecification


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MatchContext:
    """Pending argument specifications for one logical call sequence.

    Specifications are consumed in the order they were enqueued, which is the
    left-to-right order of the placeholders in the guarded call expression.

    Attributes
    ----------
    name
        Optional label used in log messages.
    """

    name: str | None = None
    _pending: deque[ArgumentSpecification] = field(default_factory=deque, repr=False)

    def enqueue_specification(self, specification: ArgumentSpecification) -> None:
        self._pending.append(specification)
        logger.debug(
            "Enqueued %s for %s (%d pending)",
            specification,
            self.name or "match context",
            len(self._pending),
        )

    def dequeue_specification(self) -> ArgumentSpecification:
        """Remove and return the oldest pending specification.

        Raises
        ------
        NoPendingSpecificationError
            If nothing is pending.
        """
        if not self._pending:
            raise NoPendingSpecificationError("No argument specification is pending in this match context")
        specification = self._pending.popleft()
        logger.debug("Dequeued %s (%d pending)", specification, len(self._pending))
        return specification

    def remove(self, specification: ArgumentSpecification) -> bool:
        """Remove ``specification`` wherever it sits in the queue.

        Returns
        -------
        bool
            False if it was not pending.
        """
        try:
            self._pending.remove(specification)
        except ValueError:
            return False
        logger.debug("Consumed %s out of order (%d pending)", specification, len(self._pending))
        return True

    def drain(self) -> list[ArgumentSpecification]:
        """Remove and return every pending specification, oldest first."""
        drained = list(self._pending)
        self._pending.clear()
        return drained

    def clear(self) -> None:
        self._pending.clear()

    @property
    def pending(self) -> tuple[ArgumentSpecification, ...]:
        return tuple(self._pending)

    def __len__(self) -> int:
        return len(self._pending)


MATCH_CONTEXT: ContextVar[MatchContext | None] = ContextVar("match_context", default=None)


def get_match_context() -> MatchContext:
    """Return the match context bound to the current execution context.

    A new context is created and bound on first use, so every thread starts
    with its own queue.
    """
    ctx = MATCH_CONTEXT.get()
    if ctx is None:
        ctx = MatchContext()
        MATCH_CONTEXT.set(ctx)
    return ctx


@contextmanager
def match_context_scope(ctx: MatchContext | None = None) -> Iterator[MatchContext]:
    """Temporarily set `MATCH_CONTEXT` for the duration of the ``with`` block.

    Specifications still pending when the block exits are discarded and
    reported with a warning, since a placeholder that was never consumed was
    not passed to the call it was created for.

    Parameters
    ----------
    ctx : MatchContext or None
        The context to bind. A fresh one is created when omitted.
    """
    ctx = ctx if ctx is not None else MatchContext()
    token = MATCH_CONTEXT.set(ctx)
    try:
        yield ctx
    finally:
        MATCH_CONTEXT.reset(token)
        leftover = ctx.drain()
        if leftover and get_settings().warn_unconsumed:
            logger.warning(
                "%d argument specification(s) were never consumed: %s",
                len(leftover),
                ", ".join(str(spec) for spec in leftover),
            )
