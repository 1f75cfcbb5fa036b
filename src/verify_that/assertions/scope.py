"""Scoped collection of assertion failures."""

from __future__ import annotations

import logging
from contextvars import ContextVar, Token
from types import TracebackType

from verify_that.exceptions import AssertionScopeError

logger = logging.getLogger(__name__)


ASSERTION_SCOPE: ContextVar[AssertionScope | None] = ContextVar("assertion_scope", default=None)


class AssertionScope:
    """Buffer assertion failures instead of raising them one at a time.

    While a scope is active, checks made through :func:`fail` or
    :func:`~verify_that.assertions.expect` record their failure message here
    and let execution continue. Buffered failures can be taken out with
    :meth:`discard` without raising.

    When the ``with`` block exits normally and failures are still buffered,
    they are forwarded to the enclosing scope, or raised together as an
    :class:`~verify_that.exceptions.AssertionScopeError` if there is none.

    Examples
    --------
    >>> with AssertionScope() as scope:
    ...     expect(2).to_be(1)
    ...     failures = scope.discard()
    >>> failures
    ['Expected value to be 1, but found 2.']
    """

    def __init__(self) -> None:
        self._failures: list[str] = []
        self._parent: AssertionScope | None = None
        self._token: Token[AssertionScope | None] | None = None

    def __enter__(self) -> AssertionScope:
        if self._token is not None:
            raise RuntimeError("AssertionScope is already active")
        self._parent = ASSERTION_SCOPE.get()
        self._token = ASSERTION_SCOPE.set(self)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._token is not None:
            ASSERTION_SCOPE.reset(self._token)
            self._token = None

        if exc_type is not None or not self._failures:
            return

        failures = self.discard()
        if self._parent is not None:
            for message in failures:
                self._parent.add_failure(message)
            return
        raise AssertionScopeError(failures)

    def add_failure(self, message: str) -> None:
        logger.debug("Assertion failure recorded: %s", message)
        self._failures.append(message)

    @property
    def failures(self) -> tuple[str, ...]:
        return tuple(self._failures)

    @property
    def has_failures(self) -> bool:
        return bool(self._failures)

    def discard(self) -> list[str]:
        """Return the buffered failures in the order they occurred and forget them."""
        failures, self._failures = self._failures, []
        return failures


def current_scope() -> AssertionScope | None:
    """Get the innermost active assertion scope, or None outside any scope."""
    return ASSERTION_SCOPE.get()


def fail(message: str) -> None:
    """Report a failed check.

    Records ``message`` in the active scope, or raises ``AssertionError``
    when no scope is active.
    """
    scope = ASSERTION_SCOPE.get()
    if scope is None:
        raise AssertionError(message)
    scope.add_failure(message)
