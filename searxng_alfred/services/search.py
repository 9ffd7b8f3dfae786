"""SearXNG HTTP integration: autocomplete suggestions and JSON results."""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import ValidationError

from searxng_alfred.config import WorkflowSettings
from searxng_alfred.domain.filters import FilterContext, filter_query_params
from searxng_alfred.domain.models import SearchResult
from searxng_alfred.logging import logger
from searxng_alfred.services.autocomplete import parse_autocomplete_response
from searxng_alfred.services.exceptions import SearchServiceError


class SearchService:
    """Thin client for a single SearXNG instance."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: WorkflowSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or WorkflowSettings()

    @property
    def base_url(self) -> str:
        return self._settings.base_url

    async def autocomplete(self, query: str) -> list[str]:
        """Fetch suggestions for ``query``; any failure means no suggestions."""

        query = query.strip()
        if not query:
            return []
        try:
            response = await self._client.get(
                f"{self.base_url}/autocompleter",
                params={"q": query},
                timeout=self._settings.request_timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "autocomplete_http_error",
                status_code=exc.response.status_code,
                query=query,
            )
            return []
        except httpx.RequestError as exc:
            logger.warning("autocomplete_request_failed", error=str(exc), query=query)
            return []

        suggestions = parse_autocomplete_response(response.content)
        logger.debug("autocomplete_received", query=query, count=len(suggestions))
        return suggestions

    async def search(self, query: str, filters: FilterContext | None = None) -> list[SearchResult]:
        query = query.strip()
        if not query:
            return []
        filters = filters or FilterContext()
        params: list[tuple[str, str]] = [("q", query), ("format", "json")]
        params.extend(filter_query_params(filters.category, filters.time_range))

        try:
            response = await self._client.get(
                f"{self.base_url}/search",
                params=params,
                timeout=self._settings.request_timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            if status_code == 403:
                raise SearchServiceError(
                    "SearXNG refused the request (403). Is the JSON format enabled?"
                ) from exc
            raise SearchServiceError(f"SearXNG request failed ({status_code})") from exc
        except httpx.TimeoutException as exc:
            raise SearchServiceError("SearXNG request timed out") from exc
        except httpx.RequestError as exc:
            raise SearchServiceError(f"SearXNG request failed: {exc}") from exc

        try:
            data = response.json()
        except ValueError:
            logger.warning("search_invalid_json", query=query)
            return []
        return self._parse_results(data)

    def _parse_results(self, data: Any) -> list[SearchResult]:
        if not isinstance(data, dict):
            return []
        raw_results = data.get("results") or []
        if not isinstance(raw_results, list):
            return []

        results: list[SearchResult] = []
        for raw in raw_results:
            if len(results) >= self._settings.result_limit:
                break
            try:
                results.append(SearchResult.model_validate(raw))
            except ValidationError:
                logger.debug("search_result_skipped", result=raw)
        return results


__all__ = ["SearchService"]
