# adapters/__init__.py

from .newsapi_provider import NewsAPIProvider

__all__ = ["NewsAPIProvider"]
