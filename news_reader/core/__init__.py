# core/__init__.py

from .config import Settings, settings

__all__ = ["Settings", "settings"]
