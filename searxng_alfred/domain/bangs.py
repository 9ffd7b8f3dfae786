"""Extraction of ``!category`` and ``!timerange`` modifiers from a raw query."""

from __future__ import annotations

import re

from pydantic import BaseModel

from searxng_alfred.domain.filters import TIME_RANGE_LABELS, FilterContext

CATEGORY_BANGS = frozenset(
    {
        "general",
        "images",
        "videos",
        "news",
        "map",
        "music",
        "it",
        "science",
        "files",
        "social_media",
    }
)
TIME_RANGE_BANGS = frozenset(TIME_RANGE_LABELS)

_BANG_RE = re.compile(r"(?<!\S)!(\w+)(?!\S)\s*")


class ParsedQuery(BaseModel):
    query: str
    filters: FilterContext = FilterContext()


def parse_bangs(raw_query: str) -> ParsedQuery:
    """Split category/time-range bangs from the search text.

    The first bang of each kind wins and later ones are dropped. Bangs that
    name neither (engine shortcuts such as ``!wp``) are left for SearXNG.
    """

    category: str | None = None
    time_range: str | None = None

    def _strip(match: re.Match[str]) -> str:
        nonlocal category, time_range
        name = match.group(1).lower()
        if name in CATEGORY_BANGS:
            if category is None:
                category = name
            return ""
        if name in TIME_RANGE_BANGS:
            if time_range is None:
                time_range = name
            return ""
        return match.group(0)

    query = _BANG_RE.sub(_strip, raw_query)
    return ParsedQuery(
        query=query.strip(),
        filters=FilterContext(category=category, time_range=time_range),
    )


__all__ = ["CATEGORY_BANGS", "TIME_RANGE_BANGS", "ParsedQuery", "parse_bangs"]
