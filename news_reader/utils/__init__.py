# utils/__init__.py

from .dependencies import container, configure_container, get_gateway_service

__all__ = ["container", "configure_container", "get_gateway_service"]
