# interfaces/__init__.py

from .news_provider_interface import (
    NewsProviderInterface,
    NewsProviderError,
    NetworkFailure,
    UpstreamFailure,
)

__all__ = [
    "NewsProviderInterface",
    "NewsProviderError",
    "NetworkFailure",
    "UpstreamFailure",
]
