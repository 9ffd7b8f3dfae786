"""Builders for script filter items."""

from __future__ import annotations

from urllib.parse import quote

from searxng_alfred.domain.filters import (
    blank_to_none,
    filter_query_params,
    format_filter_subtitle,
)
from searxng_alfred.domain.models import DEFAULT_ICON_PATH, DisplayItem, ItemIcon, SearchResult

DEFAULT_SUBTITLE = "Search SearXNG"
SNIPPET_MAX_CHARS = 120


def encode_query(text: str) -> str:
    """Percent-encode ``text`` as a query component; spaces become ``%20``."""

    return quote(text, safe="")


def build_search_url(
    base_url: str,
    text: str,
    category: str | None = None,
    time_range: str | None = None,
) -> str:
    """Search URL for ``text`` under ``base_url``.

    Trailing slashes on ``base_url`` are dropped, so ``https://host/`` and
    ``https://host`` both give ``https://host/search?q=...``.
    """

    url = f"{base_url.rstrip('/')}/search?q={encode_query(text)}"
    for key, value in filter_query_params(category, time_range):
        url += f"&{key}={encode_query(value)}"
    return url


def _bang_variables(category: str | None, time_range: str | None) -> dict[str, str] | None:
    category, time_range = blank_to_none(category), blank_to_none(time_range)
    variables: dict[str, str] = {}
    if category:
        variables["category"] = category
    if time_range:
        variables["timeRange"] = time_range
    return variables or None


def _suggestion_subtitle(category: str | None, time_range: str | None) -> str:
    category, time_range = blank_to_none(category), blank_to_none(time_range)
    parts = ["Search"]
    if category:
        parts.append(category.lower())
    if time_range:
        parts.append(f"(past {time_range})")
    parts.append("for this suggestion")
    return " ".join(parts)


def suggestion_item(
    suggestion: str,
    base_url: str,
    category: str | None = None,
    time_range: str | None = None,
    *,
    icon_path: str = DEFAULT_ICON_PATH,
) -> DisplayItem:
    return DisplayItem(
        title=suggestion,
        subtitle=_suggestion_subtitle(category, time_range),
        arg=build_search_url(base_url, suggestion, category, time_range),
        icon=ItemIcon(path=icon_path),
        autocomplete=suggestion,
        variables=_bang_variables(category, time_range),
    )


def exact_query_item(
    query: str,
    base_url: str,
    category: str | None = None,
    time_range: str | None = None,
    *,
    icon_path: str = DEFAULT_ICON_PATH,
) -> DisplayItem:
    """Item that searches for the literal query.

    ``autocomplete`` stays unset: selecting this item must not feed the same
    text back into the input and produce the same item again.
    """

    return DisplayItem(
        title=f'Search for "{query}"',
        subtitle=format_filter_subtitle(category, time_range) or DEFAULT_SUBTITLE,
        arg=build_search_url(base_url, query, category, time_range),
        icon=ItemIcon(path=icon_path),
        variables=_bang_variables(category, time_range),
    )


def _snippet(text: str) -> str:
    text = " ".join(text.split())
    if len(text) <= SNIPPET_MAX_CHARS:
        return text
    return text[: SNIPPET_MAX_CHARS - 1].rstrip() + "…"


def result_item(result: SearchResult, *, icon_path: str = DEFAULT_ICON_PATH) -> DisplayItem:
    return DisplayItem(
        title=result.title.strip() or result.url,
        subtitle=_snippet(result.content) or result.url,
        arg=result.url,
        icon=ItemIcon(path=icon_path),
        quicklookurl=result.url,
    )


def placeholder_item(
    category: str | None = None,
    time_range: str | None = None,
    *,
    icon_path: str = DEFAULT_ICON_PATH,
) -> DisplayItem:
    return DisplayItem(
        title=DEFAULT_SUBTITLE,
        subtitle=format_filter_subtitle(category, time_range) or "Type to search",
        arg="",
        valid=False,
        icon=ItemIcon(path=icon_path),
    )


def error_item(message: str, *, icon_path: str = DEFAULT_ICON_PATH) -> DisplayItem:
    return DisplayItem(
        title="Search failed",
        subtitle=message,
        arg="",
        valid=False,
        icon=ItemIcon(path=icon_path),
    )


__all__ = [
    "DEFAULT_SUBTITLE",
    "build_search_url",
    "encode_query",
    "error_item",
    "exact_query_item",
    "placeholder_item",
    "result_item",
    "suggestion_item",
]
