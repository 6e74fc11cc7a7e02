"""Tests for HTTP-based adapters."""

import asyncio
import json

import httpx
import pytest

from recipe_macros.adapters.fdc_client import HttpxFdcClient


def test_fdc_client_search_and_get() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.path.endswith("/foods/search"):
            return httpx.Response(200, json={"foods": [{"fdcId": 1}]})
        return httpx.Response(200, json={"fdcId": 1, "foodNutrients": []})

    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(transport=transport)
    client = HttpxFdcClient(
        api_key="key",
        base_url="https://api.test",
        http_client=async_client,
    )

    search = asyncio.run(client.search_foods("chicken", ("SR Legacy",), page_size=5))
    food = asyncio.run(client.get_food(1))

    assert search["foods"] == [{"fdcId": 1}]
    assert food["fdcId"] == 1
    search_request, food_request = seen
    assert search_request.method == "POST"
    assert search_request.url.params["api_key"] == "key"
    assert json.loads(search_request.content) == {
        "query": "chicken",
        "pageSize": 5,
        "dataType": ["SR Legacy"],
    }
    assert food_request.url.path == "/food/1"


def test_fdc_client_omits_empty_data_types() -> None:
    bodies: list[dict[str, object]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json={"foods": []})

    client = HttpxFdcClient(
        api_key="key",
        base_url="https://api.test",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    asyncio.run(client.search_foods("rice"))

    assert "dataType" not in bodies[0]


def test_fdc_client_raises_for_error_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, json={"error": "rate limited"})

    client = HttpxFdcClient(
        api_key="key",
        base_url="https://api.test",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.get_food(1))


def test_fdc_client_create_and_configuration() -> None:
    client = HttpxFdcClient.create(api_key=None, base_url="https://api.test/fdc/v1/")

    assert client.base_url == "https://api.test/fdc/v1"
    assert not client.is_configured()
    asyncio.run(client.close())
