# adapters/newsapi_provider.py

import asyncio
from typing import Optional, Dict, Any

import aiohttp
from pydantic import ValidationError

from ..interfaces.news_provider_interface import (
    NewsProviderInterface,
    NetworkFailure,
    UpstreamFailure,
)
from ..schemas.news_schemas import FeedPage
from ..core.config import settings
from common.logger import LoggerFactory, LoggerType, LogLevel


class NewsAPIProvider(NewsProviderInterface):
    """NewsAPI.org provider: one outbound call per feed request, no shared session"""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://newsapi.org/v2",
        language: str = "en",
        timeout: float = 10.0,
    ):
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.language = language
        self.timeout = timeout
        self.logger = LoggerFactory.get_logger(
            name="newsapi-provider",
            logger_type=LoggerType.STANDARD,
            level=LogLevel.INFO,
            file_level=LogLevel.DEBUG,
            log_file=settings.log_file("newsapi_provider"),
        )

        if not api_key:
            self.logger.warning("NewsAPI provider initialized without an API key")

    async def search_everything(self, query: str, page: int, page_size: int) -> FeedPage:
        params = {
            "q": query,
            "language": self.language,
            "page": page,
            "pageSize": page_size,
        }
        return await self._fetch_page("everything", params)

    async def top_headlines_by_category(
        self, category: str, page: int, page_size: int
    ) -> FeedPage:
        params = {"category": category, "page": page, "pageSize": page_size}
        return await self._fetch_page("top-headlines", params)

    async def top_headlines_by_country(
        self, country: str, page: int, page_size: int
    ) -> FeedPage:
        params = {"country": country, "page": page, "pageSize": page_size}
        return await self._fetch_page("top-headlines", params)

    async def _fetch_page(self, endpoint: str, params: Dict[str, Any]) -> FeedPage:
        """
        Call one provider endpoint and parse the page

        Args:
            endpoint: Path under the provider base URL
            params: Query parameters (credential excluded)

        Returns:
            FeedPage with provider order preserved

        Raises:
            NetworkFailure: Request did not complete (including timeout)
            UpstreamFailure: Provider error status or malformed payload
        """
        url = f"{self.base_url}/{endpoint}"
        self.logger.debug(f"Forwarding to {url} with params {params}")

        status, payload = await self._get_json(url, params)
        page = self._parse_payload(status, payload)

        self.logger.info(
            f"Fetched {len(page.articles)} articles from {endpoint} "
            f"(page {params.get('page')}, total {page.total_results})"
        )
        return page

    async def _get_json(self, url: str, params: Dict[str, Any]) -> tuple:
        headers = {"X-Api-Key": self._api_key, "Accept": "application/json"}
        timeout = aiohttp.ClientTimeout(total=self.timeout)

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url, params=params, headers=headers) as response:
                    try:
                        payload = await response.json(content_type=None)
                    except ValueError:
                        payload = None
                    return response.status, payload

        except asyncio.TimeoutError as e:
            self.logger.warning(f"Upstream request timed out after {self.timeout}s")
            raise NetworkFailure(
                f"Upstream request timed out after {self.timeout}s",
                timed_out=True,
                details={"url": url},
            ) from e
        except aiohttp.ClientError as e:
            self.logger.warning(f"Upstream request failed: {e}")
            raise NetworkFailure(
                f"Upstream request failed: {e}",
                details={"url": url, "error_type": type(e).__name__},
            ) from e

    def _parse_payload(self, status: int, payload: Optional[Any]) -> FeedPage:
        """Turn a provider response into a FeedPage or raise UpstreamFailure"""
        if not isinstance(payload, dict):
            raise UpstreamFailure(
                "Upstream returned a malformed payload", status_code=status
            )

        if status != 200 or payload.get("status") == "error":
            message = payload.get("message") or f"Upstream returned status {status}"
            self.logger.warning(
                f"Upstream error {status}: {payload.get('code')} {message}"
            )
            raise UpstreamFailure(
                message,
                status_code=status,
                details={"code": payload.get("code")},
            )

        try:
            return FeedPage(
                total_results=payload.get("totalResults") or 0,
                articles=payload.get("articles") or [],
            )
        except ValidationError as e:
            raise UpstreamFailure(
                f"Upstream returned invalid articles: {e.error_count()} errors",
                status_code=status,
            ) from e

    def get_provider_info(self) -> Dict[str, Any]:
        return {
            "provider": "newsapi",
            "base_url": self.base_url,
            "language": self.language,
            "timeout": self.timeout,
            "credential_configured": bool(self._api_key),
        }
