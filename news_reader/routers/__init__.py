# routers/__init__.py

from . import feed_router

__all__ = ["feed_router"]
