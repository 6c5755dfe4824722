# utils/dependencies.py

"""
Dependency injection utilities for the news reader gateway.
"""

from typing import Any, Dict

from dependency_injector import containers, providers

from ..adapters.newsapi_provider import NewsAPIProvider
from ..services.feed_gateway_service import FeedGatewayService
from ..core.config import settings
from common.logger import LoggerFactory, LoggerType, LogLevel


class Container(containers.DeclarativeContainer):
    """Dependency injection container using dependency-injector"""

    # Configuration
    config = providers.Configuration()

    # Logger
    logger = providers.Singleton(
        LoggerFactory.get_logger,
        name="dependency-container",
        logger_type=LoggerType.STANDARD,
        level=LogLevel.INFO,
    )

    # Upstream provider (NewsAPI)
    news_provider = providers.Singleton(
        NewsAPIProvider,
        api_key=config.newsapi_api_key.as_(str),
        base_url=config.newsapi_base_url.as_(str),
        language=config.newsapi_language.as_(str),
        timeout=config.upstream_timeout_seconds.as_(float),
    )

    # Gateway service
    gateway_service = providers.Singleton(
        FeedGatewayService,
        provider=news_provider,
        default_query=config.default_all_news_query.as_(str),
        max_page_size=config.max_page_size.as_(int),
    )


# Global container instance
container = Container()

# Configure default values from settings
container.config.newsapi_api_key.from_value(settings.newsapi_api_key or "")
container.config.newsapi_base_url.from_value(settings.newsapi_base_url)
container.config.newsapi_language.from_value(settings.newsapi_language)
container.config.upstream_timeout_seconds.from_value(settings.upstream_timeout_seconds)
container.config.default_all_news_query.from_value(settings.default_all_news_query)
container.config.max_page_size.from_value(settings.max_page_size)


def configure_container(config: Dict[str, Any]) -> None:
    """Override container configuration and drop already built singletons"""
    container.config.from_dict(config)
    container.reset_singletons()
    container.logger().info(
        f"Container configuration updated: {', '.join(sorted(config))}"
    )


def get_gateway_service() -> FeedGatewayService:
    """FastAPI dependency for the gateway service"""
    return container.gateway_service()
