"""
Shared fixtures for the news reader test suite.
"""

import inspect
from typing import Any, Callable, Dict, List

import pytest

from news_reader.client.gateway_client import GatewayClientInterface
from news_reader.interfaces.news_provider_interface import NewsProviderInterface
from news_reader.schemas.news_schemas import FeedPage, FeedQuery, GatewayEnvelope


class StubGatewayClient(GatewayClientInterface):
    """Gateway client whose answers come from a handler(query) callable"""

    def __init__(self, handler: Callable[[FeedQuery], Any]):
        self.handler = handler
        self.requests: List[FeedQuery] = []

    async def fetch_feed(self, query: FeedQuery) -> GatewayEnvelope:
        self.requests.append(query)
        result = self.handler(query)
        if inspect.isawaitable(result):
            result = await result
        if isinstance(result, Exception):
            raise result
        return result


class StubProvider(NewsProviderInterface):
    """Upstream provider recording calls and returning a fixed page or error"""

    def __init__(self, page: FeedPage = None, error: Exception = None):
        self.page = page or FeedPage(total_results=0, articles=[])
        self.error = error
        self.calls: List[tuple] = []

    async def _answer(self, *call) -> FeedPage:
        self.calls.append(call)
        if self.error:
            raise self.error
        return self.page

    async def search_everything(self, query, page, page_size):
        return await self._answer("everything", query, page, page_size)

    async def top_headlines_by_category(self, category, page, page_size):
        return await self._answer("category", category, page, page_size)

    async def top_headlines_by_country(self, country, page, page_size):
        return await self._answer("country", country, page, page_size)

    def get_provider_info(self) -> Dict[str, Any]:
        return {"provider": "stub", "credential_configured": True}


@pytest.fixture
def make_article():
    """Article dict in the provider's raw shape"""

    def _make(n: int, **overrides) -> Dict[str, Any]:
        article = {
            "title": f"News {n}",
            "description": f"Description {n}",
            "urlToImage": f"image-url-{n}",
            "publishedAt": "2024-10-01",
            "url": f"url-{n}",
            "author": f"Author {n}",
            "source": {"name": f"Source {n}"},
        }
        article.update(overrides)
        return article

    return _make


@pytest.fixture
def make_envelope(make_article):
    """Successful envelope holding articles numbered from `first`"""

    def _make(total_results: int, first: int = 1, count: int = 0) -> GatewayEnvelope:
        articles = [make_article(n) for n in range(first, first + count)]
        return GatewayEnvelope.ok(
            FeedPage(total_results=total_results, articles=articles)
        )

    return _make


@pytest.fixture
def stub_client():
    return StubGatewayClient


@pytest.fixture
def stub_provider():
    return StubProvider
