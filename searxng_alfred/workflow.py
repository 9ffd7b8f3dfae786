"""Turn a launcher query into script filter items."""

from __future__ import annotations

import asyncio
import json
from typing import Iterable

from searxng_alfred.config import WorkflowSettings
from searxng_alfred.domain.bangs import parse_bangs
from searxng_alfred.domain.filters import FilterContext
from searxng_alfred.domain.items import (
    error_item,
    exact_query_item,
    placeholder_item,
    result_item,
    suggestion_item,
)
from searxng_alfred.domain.models import DisplayItem
from searxng_alfred.domain.policy import should_show_exact_query_item, should_show_full_results
from searxng_alfred.logging import logger
from searxng_alfred.services.exceptions import SearchServiceError
from searxng_alfred.services.search import SearchService


async def _result_items(
    service: SearchService,
    query: str,
    filters: FilterContext,
    icon_path: str,
) -> list[DisplayItem]:
    try:
        results = await service.search(query, filters)
    except SearchServiceError as exc:
        logger.warning("search_failed", query=query, error=str(exc))
        return [error_item(str(exc), icon_path=icon_path)]
    return [result_item(result, icon_path=icon_path) for result in results]


async def build_items(
    raw_query: str,
    service: SearchService,
    settings: WorkflowSettings,
    filters: FilterContext | None = None,
) -> list[DisplayItem]:
    """Build suggestion, exact-query and result items for ``raw_query``.

    Bangs typed in the query take precedence over ``filters``, which carry
    the context of an earlier selection.
    """

    parsed = parse_bangs(raw_query)
    active = parsed.filters.merged_with(filters)
    query = parsed.query
    category, time_range = active.category, active.time_range
    icon_path = settings.icon_path
    base_url = service.base_url

    if not query:
        return [placeholder_item(category, time_range, icon_path=icon_path)]

    if should_show_full_results(query) and settings.result_limit > 0:
        raw_suggestions, results = await asyncio.gather(
            service.autocomplete(query),
            _result_items(service, query, active, icon_path),
        )
    else:
        raw_suggestions, results = await service.autocomplete(query), []

    suggestions = [s for s in raw_suggestions if isinstance(s, str)][: settings.suggestion_limit]
    items = [
        suggestion_item(s, base_url, category, time_range, icon_path=icon_path)
        for s in suggestions
    ]
    if should_show_exact_query_item(query, suggestions):
        items.append(exact_query_item(query, base_url, category, time_range, icon_path=icon_path))
    items.extend(results)

    logger.debug(
        "items_built",
        query=query,
        category=category,
        time_range=time_range,
        suggestions=len(suggestions),
        results=len(results),
    )
    return items


def render(items: Iterable[DisplayItem]) -> str:
    return json.dumps({"items": [item.to_alfred() for item in items]}, ensure_ascii=False)


__all__ = ["build_items", "render"]
