# schemas/__init__.py

from .news_schemas import *

__all__ = [
    "REMOVED_MARKER",
    "FeedMode",
    "NewsCategory",
    "Article",
    "FeedPage",
    "GatewayEnvelope",
    "FeedQuery",
]
