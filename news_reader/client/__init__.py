# client/__init__.py

from .feed_controller import (
    FAILURE_MESSAGE,
    FeedController,
    FeedFailure,
    FeedState,
    compute_total_pages,
    load_page,
)
from .gateway_client import GatewayClientError, GatewayClientInterface, HttpGatewayClient
from .redaction import filter_redacted, redact_page

__all__ = [
    "FAILURE_MESSAGE",
    "FeedController",
    "FeedFailure",
    "FeedState",
    "compute_total_pages",
    "load_page",
    "GatewayClientError",
    "GatewayClientInterface",
    "HttpGatewayClient",
    "filter_redacted",
    "redact_page",
]
