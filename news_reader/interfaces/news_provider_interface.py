# interfaces/news_provider_interface.py

"""
Upstream news provider interface and its error taxonomy.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..schemas.news_schemas import FeedPage


class NewsProviderInterface(ABC):
    """Abstract upstream news provider"""

    @abstractmethod
    async def search_everything(self, query: str, page: int, page_size: int) -> FeedPage:
        """
        Keyword search across all articles

        Raises:
            NewsProviderError: When the forwarding attempt fails
        """
        pass

    @abstractmethod
    async def top_headlines_by_category(
        self, category: str, page: int, page_size: int
    ) -> FeedPage:
        """Top headlines scoped to a category"""
        pass

    @abstractmethod
    async def top_headlines_by_country(
        self, country: str, page: int, page_size: int
    ) -> FeedPage:
        """Top headlines scoped to an ISO country code"""
        pass

    @abstractmethod
    def get_provider_info(self) -> Dict[str, Any]:
        """Provider description, without credentials"""
        pass


class NewsProviderError(Exception):
    """Base exception for upstream provider operations."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class NetworkFailure(NewsProviderError):
    """The upstream request never completed."""

    def __init__(
        self, message: str, timed_out: bool = False, details: Optional[dict] = None
    ):
        super().__init__(message, details)
        self.timed_out = timed_out


class UpstreamFailure(NewsProviderError):
    """The provider answered with an error or an unreadable payload."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[dict] = None,
    ):
        super().__init__(message, details)
        self.status_code = status_code
