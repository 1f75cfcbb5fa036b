"""Helpers that verify ``unittest.mock`` calls with placeholder arguments."""

from __future__ import annotations

import logging
from typing import Any
from unittest.mock import Mock

from verify_that.context import get_match_context
from verify_that.exceptions import PlaceholderMisuseError
from verify_that.placeholder import ArgumentPlaceholder

logger = logging.getLogger(__name__)


def _consume_specifications(args: tuple[Any, ...], kwargs: dict[str, Any]) -> int:
    """Take one pending specification per placeholder, in argument order."""
    ctx = get_match_context()
    placeholders = [arg for arg in (*args, *kwargs.values()) if isinstance(arg, ArgumentPlaceholder)]
    for position, placeholder in enumerate(placeholders):
        if placeholder.ctx is not ctx:
            raise PlaceholderMisuseError(
                f"Placeholder at position {position} was created in a different match context"
            )
        pending = ctx.pending
        if not pending or pending[0] is not placeholder.specification:
            raise PlaceholderMisuseError(
                f"Placeholder at position {position} does not belong to the next pending "
                f"specification; create placeholders directly inside the expected call"
            )
        ctx.dequeue_specification()
    return len(placeholders)


def assert_received(mock: Mock, /, *args: Any, **kwargs: Any) -> None:
    """Assert that ``mock`` received at least one call matching the arguments.

    Placeholders from :func:`verify_that.that` among the arguments consume
    their specifications first, then the check is delegated to
    ``mock.assert_any_call``.

    Raises
    ------
    AssertionError
        If no recorded call matches.
    PlaceholderMisuseError
        If the placeholders are not the next pending specifications.
    """
    consumed = _consume_specifications(args, kwargs)
    logger.debug("Verifying %s with %d placeholder(s)", mock, consumed)
    mock.assert_any_call(*args, **kwargs)


def assert_received_once(mock: Mock, /, *args: Any, **kwargs: Any) -> None:
    """Assert that ``mock`` was called exactly once, with matching arguments."""
    consumed = _consume_specifications(args, kwargs)
    logger.debug("Verifying single call of %s with %d placeholder(s)", mock, consumed)
    mock.assert_called_once_with(*args, **kwargs)
