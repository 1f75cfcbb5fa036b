"""verify_that - check mock call arguments with assertions."""

from .assertions import AssertionScope, Expectation, expect, fail
from .config import VerifySettings, get_settings, settings_scope
from .context import MatchContext, get_match_context, match_context_scope
from .exceptions import (
    ArgumentTypeMismatchError,
    AssertionScopeError,
    NoPendingSpecificationError,
    PlaceholderMisuseError,
    VerifyThatError,
)
from .formatting import format_argument
from .matcher import AssertionMatcher, MatchEvaluation
from .mock import assert_received, assert_received_once
from .placeholder import ArgumentPlaceholder, default_value
from .registrar import ArgumentSpecification
from .verify import Verify, that
from .version import __version__


__all__ = [
    # Entry point
    "Verify",
    "that",
    # Matching
    "AssertionMatcher",
    "MatchEvaluation",
    "ArgumentPlaceholder",
    "ArgumentSpecification",
    "default_value",
    "format_argument",
    # Match context
    "MatchContext",
    "get_match_context",
    "match_context_scope",
    # Assertions
    "AssertionScope",
    "Expectation",
    "expect",
    "fail",
    # unittest.mock helpers
    "assert_received",
    "assert_received_once",
    # Settings
    "VerifySettings",
    "get_settings",
    "settings_scope",
    # Errors
    "VerifyThatError",
    "ArgumentTypeMismatchError",
    "AssertionScopeError",
    "NoPendingSpecificationError",
    "PlaceholderMisuseError",
]
