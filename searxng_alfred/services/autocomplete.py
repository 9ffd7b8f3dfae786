"""Decoding of OpenSearch-style autocomplete payloads."""

from __future__ import annotations

import json
from typing import Any


def parse_autocomplete_response(raw: str | bytes | None) -> list[Any]:
    """Return the suggestion list from a ``[query, [suggestions...]]`` payload.

    Anything that does not have that shape yields an empty list. Entries are
    returned in upstream order and are not type-checked individually.
    """

    if not raw:
        return []
    try:
        data = json.loads(raw)
    except (TypeError, ValueError, RecursionError):
        return []
    if not isinstance(data, list) or len(data) < 2:
        return []
    suggestions = data[1]
    if not isinstance(suggestions, list):
        return []
    return suggestions


__all__ = ["parse_autocomplete_response"]
