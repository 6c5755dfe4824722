from .logger_factory import LoggerFactory, LoggerType
from .logger_interface import LoggerInterface, LogLevel
from .standard_logger import StandardLogger

__all__ = [
    "LoggerInterface",
    "LogLevel",
    "StandardLogger",
    "LoggerFactory",
    "LoggerType",
]
