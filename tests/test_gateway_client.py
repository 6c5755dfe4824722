"""
Tests for the httpx gateway client using httpx.MockTransport.
"""

import httpx
import pytest

from news_reader.client.gateway_client import GatewayClientError, HttpGatewayClient
from news_reader.schemas.news_schemas import FeedMode, FeedQuery


def make_client(handler) -> HttpGatewayClient:
    return HttpGatewayClient(
        base_url="http://gateway.test/", transport=httpx.MockTransport(handler)
    )


class TestHttpGatewayClient:
    @pytest.mark.asyncio
    async def test_country_request_and_envelope(self, make_article):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={
                    "success": True,
                    "data": {"totalResults": 10, "articles": [make_article(1)]},
                },
            )

        client = make_client(handler)
        query = FeedQuery(mode=FeedMode.COUNTRY_NEWS, selector="us", page=2)

        envelope = await client.fetch_feed(query)
        await client.aclose()

        assert seen[0].url.path == "/country/us"
        assert seen[0].url.params["page"] == "2"
        assert seen[0].url.params["pageSize"] == "10"
        assert envelope.success is True
        assert envelope.data.total_results == 10
        assert envelope.data.articles[0].source_name == "Source 1"

    @pytest.mark.asyncio
    async def test_all_news_sends_query_text(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(
                200, json={"success": True, "data": {"totalResults": 0, "articles": []}}
            )

        async with make_client(handler) as client:
            await client.fetch_feed(FeedQuery(selector="test"))

        assert seen[0].url.path == "/all-news"
        assert seen[0].url.params["q"] == "test"

    @pytest.mark.asyncio
    async def test_network_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with make_client(handler) as client:
            with pytest.raises(GatewayClientError):
                await client.fetch_feed(FeedQuery())

    @pytest.mark.asyncio
    async def test_failure_envelope_carries_message(self):
        def handler(request):
            return httpx.Response(
                502, json={"success": False, "message": "News provider error: down"}
            )

        async with make_client(handler) as client:
            with pytest.raises(GatewayClientError) as exc_info:
                await client.fetch_feed(FeedQuery())

        assert exc_info.value.status_code == 502
        assert "down" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_success_false_with_200(self):
        def handler(request):
            return httpx.Response(200, json={"success": False, "message": "nope"})

        async with make_client(handler) as client:
            with pytest.raises(GatewayClientError):
                await client.fetch_feed(FeedQuery())

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, text="<html>not json</html>"),
            httpx.Response(200, json={"data": {"totalResults": 1}}),
            httpx.Response(500, text="Internal Server Error"),
        ],
    )
    async def test_malformed_body(self, response):
        async with make_client(lambda request: response) as client:
            with pytest.raises(GatewayClientError):
                await client.fetch_feed(FeedQuery())
