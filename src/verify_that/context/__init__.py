from .context import (
    MATCH_CONTEXT,
    MatchContext,
    get_match_context,
    match_context_scope,
)

__all__ = [
    "MATCH_CONTEXT",
    "MatchContext",
    "get_match_context",
    "match_context_scope",
]
