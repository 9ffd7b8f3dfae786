"""Decisions about which items a query should produce."""

from __future__ import annotations

from typing import Sequence

# Queries this short only get autocomplete suggestions.
FULL_RESULTS_MIN_LENGTH = 3


def should_show_full_results(query: str) -> bool:
    return len(query.strip()) > FULL_RESULTS_MIN_LENGTH


def should_show_exact_query_item(query: str, suggestions: Sequence[str]) -> bool:
    """Offer the literal query unless the top suggestion already matches it.

    Only leading and trailing whitespace is ignored: ``"my  query"`` and
    ``"my query"`` are different queries.
    """

    trimmed = query.strip()
    if not trimmed or not suggestions:
        return False
    top = str(suggestions[0]).strip()
    return trimmed.lower() != top.lower()


__all__ = [
    "FULL_RESULTS_MIN_LENGTH",
    "should_show_exact_query_item",
    "should_show_full_results",
]
