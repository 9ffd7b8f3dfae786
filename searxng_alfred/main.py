"""Script filter entrypoint."""

from __future__ import annotations

import asyncio
import sys

import httpx

from searxng_alfred.config import get_settings
from searxng_alfred.domain.filters import FilterContext
from searxng_alfred.logging import bind_invocation, configure_logging, logger
from searxng_alfred.services.search import SearchService
from searxng_alfred.workflow import build_items, render


async def run(query: str) -> str:
    settings = get_settings()
    filters = FilterContext(category=settings.category, time_range=settings.time_range)
    async with httpx.AsyncClient(
        timeout=settings.request_timeout_seconds,
        follow_redirects=True,
    ) as client:
        service = SearchService(client, settings=settings)
        items = await build_items(query, service, settings, filters=filters)
    return render(items)


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    settings = get_settings()
    configure_logging(settings.log_level)
    query = " ".join(args)
    bind_invocation(query, category=settings.category, time_range=settings.time_range)
    logger.debug("workflow_invoked")
    sys.stdout.write(asyncio.run(run(query)))
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
