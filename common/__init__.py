"""
News Reader Common Module

Shared utilities used by the gateway and the feed client.

Usage:
    from common.logger import LoggerFactory, LoggerType, LogLevel
"""

__version__ = "0.1.0"

from .logger import LoggerFactory, LoggerType, LogLevel

__all__ = [
    "__version__",
    "LoggerFactory",
    "LoggerType",
    "LogLevel",
]
