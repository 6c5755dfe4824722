# services/__init__.py

from .feed_gateway_service import FeedGatewayService

__all__ = ["FeedGatewayService"]
