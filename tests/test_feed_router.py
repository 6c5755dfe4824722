"""
Tests for the gateway HTTP routes.
"""

import pytest
from fastapi.testclient import TestClient

from news_reader.interfaces.news_provider_interface import UpstreamFailure
from news_reader.main import app
from news_reader.schemas.news_schemas import FeedPage
from news_reader.services.feed_gateway_service import FeedGatewayService
from news_reader.utils.dependencies import get_gateway_service


@pytest.fixture
def provider(stub_provider, make_article):
    return stub_provider(
        FeedPage(total_results=2, articles=[make_article(1), make_article(2)])
    )


@pytest.fixture
def client(provider):
    service = FeedGatewayService(provider, default_query="world")
    app.dependency_overrides[get_gateway_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestFeedRoutes:
    def test_all_news(self, client, provider):
        response = client.get("/all-news", params={"pageSize": 10, "page": 1, "q": "test"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["totalResults"] == 2
        assert body["data"]["articles"][0]["imageUrl"] == "image-url-1"
        assert provider.calls == [("everything", "test", 1, 10)]

    def test_all_news_defaults(self, client, provider):
        response = client.get("/all-news")

        assert response.status_code == 200
        assert provider.calls[0][1:] == ("world", 1, 10)

    def test_top_headlines(self, client, provider):
        response = client.get(
            "/top-headlines", params={"pageSize": 10, "page": 1, "category": "general"}
        )

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert provider.calls == [("category", "general", 1, 10)]

    def test_country(self, client, provider):
        response = client.get("/country/us", params={"pageSize": 10, "page": 1})

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert provider.calls == [("country", "us", 1, 10)]

    def test_invalid_page_is_envelope(self, client, provider):
        response = client.get("/country/us", params={"page": 0})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert "page" in body["message"]
        assert provider.calls == []

    def test_missing_category_is_envelope(self, client):
        response = client.get("/top-headlines")

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_upstream_failure(self, client, provider):
        provider.error = UpstreamFailure("rateLimited", status_code=429)

        response = client.get("/all-news", params={"q": "x"})

        assert response.status_code == 502
        assert response.json() == {
            "success": False,
            "message": "News provider error: rateLimited",
        }


class TestServiceRoutes:
    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["components"]["provider"]["provider"] == "stub"
