# services/feed_gateway_service.py

from typing import Tuple

from ..interfaces.news_provider_interface import (
    NewsProviderInterface,
    NewsProviderError,
    NetworkFailure,
    UpstreamFailure,
)
from ..schemas.news_schemas import FeedPage, GatewayEnvelope, NewsCategory
from ..core.config import settings
from common.logger import LoggerFactory, LoggerType, LogLevel

GatewayResult = Tuple[int, GatewayEnvelope]


class FeedGatewayService:
    """
    Stateless forwarding of feed requests to the upstream provider.

    Every call returns an HTTP status together with the uniform envelope;
    provider exceptions are converted here and never reach the router.
    """

    def __init__(
        self,
        provider: NewsProviderInterface,
        default_query: str = "world",
        max_page_size: int = 100,
    ):
        """
        Initialize gateway service

        Args:
            provider: Upstream news provider implementation
            default_query: Keyword search used when the client sends none
            max_page_size: Largest page size forwarded upstream
        """
        self.provider = provider
        self.default_query = default_query
        self.max_page_size = max_page_size

        self.logger = LoggerFactory.get_logger(
            name="feed-gateway-service",
            logger_type=LoggerType.STANDARD,
            level=LogLevel.INFO,
            file_level=LogLevel.DEBUG,
            log_file=settings.log_file("feed_gateway_service"),
        )
        self.logger.info("FeedGatewayService initialized")

    async def get_all_news(self, query: str, page: int, page_size: int) -> GatewayResult:
        query = (query or "").strip() or self.default_query
        self.logger.info(f"all-news: q={query!r}, page={page}, pageSize={page_size}")
        return await self._forward(
            "all-news",
            self.provider.search_everything(query, page, self._clamp(page_size)),
        )

    async def get_top_headlines(
        self, category: str, page: int, page_size: int
    ) -> GatewayResult:
        category = (category or "").strip().lower()
        if category not in {c.value for c in NewsCategory}:
            self.logger.warning(f"Rejected unknown category: {category!r}")
            return 400, GatewayEnvelope.fail(
                f"Unknown category '{category}'. Expected one of: "
                + ", ".join(c.value for c in NewsCategory)
            )

        self.logger.info(
            f"top-headlines: category={category}, page={page}, pageSize={page_size}"
        )
        return await self._forward(
            "top-headlines",
            self.provider.top_headlines_by_category(
                category, page, self._clamp(page_size)
            ),
        )

    async def get_country_news(
        self, iso: str, page: int, page_size: int
    ) -> GatewayResult:
        iso = (iso or "").strip().lower()
        if len(iso) != 2 or not iso.isalpha():
            self.logger.warning(f"Rejected invalid country code: {iso!r}")
            return 400, GatewayEnvelope.fail(
                f"Invalid country code '{iso}'. Expected a two-letter ISO code"
            )

        self.logger.info(f"country: iso={iso}, page={page}, pageSize={page_size}")
        return await self._forward(
            "country",
            self.provider.top_headlines_by_country(iso, page, self._clamp(page_size)),
        )

    def _clamp(self, page_size: int) -> int:
        return max(1, min(page_size, self.max_page_size))

    async def _forward(self, route: str, call) -> GatewayResult:
        try:
            page: FeedPage = await call
            return 200, GatewayEnvelope.ok(page)

        except NetworkFailure as e:
            self.logger.error(f"[{route}] network failure: {e.message}")
            status = 504 if e.timed_out else 502
            return status, GatewayEnvelope.fail(
                "News provider did not respond. Please try again later."
            )
        except UpstreamFailure as e:
            self.logger.error(
                f"[{route}] upstream failure ({e.status_code}): {e.message}"
            )
            return 502, GatewayEnvelope.fail(f"News provider error: {e.message}")
        except NewsProviderError as e:
            self.logger.error(f"[{route}] provider error: {e.message}")
            return 502, GatewayEnvelope.fail(f"News provider error: {e.message}")
        except Exception as e:
            self.logger.error(f"[{route}] unexpected forwarding error: {str(e)}")
            return 500, GatewayEnvelope.fail("Failed to fetch news from provider")

    async def health_check(self) -> dict:
        info = self.provider.get_provider_info()
        return {
            "provider": info.get("provider"),
            "credential_configured": info.get("credential_configured", False),
        }
