# client/gateway_client.py

"""
HTTP client for the news reader gateway.

The feed controller only sees `GatewayClientInterface`, so tests and other
front-ends can swap in their own implementation.
"""

from abc import ABC, abstractmethod
from typing import Optional

import httpx
from pydantic import ValidationError

from ..schemas.news_schemas import FeedQuery, GatewayEnvelope
from ..core.config import settings
from common.logger import LoggerFactory, LoggerType, LogLevel

logger = LoggerFactory.get_logger(
    name="gateway-client",
    logger_type=LoggerType.STANDARD,
    level=LogLevel.INFO,
    file_level=LogLevel.DEBUG,
    log_file=settings.log_file("gateway_client"),
)


class GatewayClientError(Exception):
    """A feed request to the gateway did not succeed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class GatewayClientInterface(ABC):
    """Abstract gateway client"""

    @abstractmethod
    async def fetch_feed(self, query: FeedQuery) -> GatewayEnvelope:
        """
        Request one page of the feed described by the query

        Raises:
            GatewayClientError: Network error, non-success status or malformed body
        """
        pass

    async def aclose(self) -> None:
        pass


class HttpGatewayClient(GatewayClientInterface):
    """httpx based gateway client"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.gateway_url).rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout or settings.client_timeout_seconds,
            transport=transport,
        )

    async def fetch_feed(self, query: FeedQuery) -> GatewayEnvelope:
        path = query.gateway_path()
        params = query.gateway_params()
        logger.debug(f"GET {self.base_url}{path} {params}")

        try:
            response = await self._client.get(path, params=params)
        except httpx.HTTPError as e:
            raise GatewayClientError(f"Gateway request failed: {e}") from e

        try:
            envelope = GatewayEnvelope.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise GatewayClientError(
                f"Gateway returned a malformed body ({response.status_code})",
                status_code=response.status_code,
            ) from e

        if response.status_code != 200 or not envelope.success:
            raise GatewayClientError(
                envelope.message or f"Gateway returned status {response.status_code}",
                status_code=response.status_code,
            )

        return envelope

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpGatewayClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
