"""Tests for the SearXNG HTTP service layer."""

from __future__ import annotations

import httpx
import pytest

from searxng_alfred.config import WorkflowSettings
from searxng_alfred.domain.filters import FilterContext
from searxng_alfred.services.exceptions import SearchServiceError
from searxng_alfred.services.search import SearchService


def _settings(**overrides) -> WorkflowSettings:
    return WorkflowSettings(searxng_url="https://search.example.com/", **overrides)


@pytest.mark.asyncio
async def test_autocomplete_parses_suggestions():
    async def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/autocompleter"
        assert request.url.params["q"] == "clim"
        return httpx.Response(200, text='["clim", ["climate change", "climbing"]]')

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        service = SearchService(client, settings=_settings())
        suggestions = await service.autocomplete("  clim ")

    assert suggestions == ["climate change", "climbing"]


@pytest.mark.asyncio
async def test_autocomplete_skips_empty_query():
    calls: list[httpx.Request] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, text="[]")

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        service = SearchService(client, settings=_settings())
        assert await service.autocomplete("   ") == []
    assert calls == []


@pytest.mark.asyncio
async def test_autocomplete_degrades_on_http_error():
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="boom")

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        service = SearchService(client, settings=_settings())
        assert await service.autocomplete("test") == []


@pytest.mark.asyncio
async def test_autocomplete_degrades_on_transport_error():
    async def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        service = SearchService(client, settings=_settings())
        assert await service.autocomplete("test") == []


@pytest.mark.asyncio
async def test_autocomplete_degrades_on_malformed_body():
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>not json</html>")

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        service = SearchService(client, settings=_settings())
        assert await service.autocomplete("test") == []


@pytest.mark.asyncio
async def test_search_sends_filters_and_limits_results():
    async def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/search"
        params = request.url.params
        assert params["q"] == "storm"
        assert params["format"] == "json"
        assert params["categories"] == "news"
        assert params["time_range"] == "day"
        return httpx.Response(
            200,
            json={
                "query": "storm",
                "results": [
                    {"url": "https://a.example", "title": "A", "content": "first"},
                    {"title": "missing url"},
                    {"url": "https://b.example", "title": "B", "content": None},
                    {"url": "https://c.example", "title": "C"},
                ],
            },
        )

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        service = SearchService(client, settings=_settings(result_limit=2))
        results = await service.search(
            "storm", FilterContext(category="news", time_range="day")
        )

    assert [result.url for result in results] == ["https://a.example", "https://b.example"]
    assert results[1].content == ""


@pytest.mark.asyncio
async def test_search_omits_absent_filters():
    async def handler(request: httpx.Request) -> httpx.Response:
        assert "categories" not in request.url.params
        assert "time_range" not in request.url.params
        return httpx.Response(200, json={"results": []})

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        service = SearchService(client, settings=_settings())
        assert await service.search("storm") == []


@pytest.mark.asyncio
async def test_search_raises_on_forbidden():
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, text="forbidden")

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        service = SearchService(client, settings=_settings())
        with pytest.raises(SearchServiceError, match="JSON format"):
            await service.search("storm")


@pytest.mark.asyncio
async def test_search_raises_on_timeout():
    async def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        service = SearchService(client, settings=_settings())
        with pytest.raises(SearchServiceError, match="timed out"):
            await service.search("storm")


@pytest.mark.asyncio
async def test_search_returns_nothing_for_non_json():
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html></html>")

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        service = SearchService(client, settings=_settings())
        assert await service.search("storm") == []
