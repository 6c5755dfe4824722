# logger/logger_factory.py

"""
Factory for creating and caching loggers.
"""

from enum import Enum
from typing import Dict, Optional

from .logger_interface import LoggerInterface, LogLevel
from .standard_logger import StandardLogger


class LoggerType(str, Enum):
    """Available logger implementations."""

    STANDARD = "standard"


class LoggerFactory:
    """Creates loggers and hands out the same instance per name."""

    _loggers: Dict[str, LoggerInterface] = {}

    @classmethod
    def create_logger(
        cls,
        name: str,
        logger_type: LoggerType = LoggerType.STANDARD,
        level: LogLevel = LogLevel.INFO,
        console_level: Optional[LogLevel] = None,
        file_level: Optional[LogLevel] = None,
        log_file: Optional[str] = None,
        use_colors: bool = True,
    ) -> LoggerInterface:
        """
        Create a new logger instance (not cached).

        Args:
            name: Logger name
            logger_type: Implementation to use
            level: Base level
            console_level: Level for console output (defaults to level)
            file_level: Level for file output (defaults to level)
            log_file: Optional path of the log file
            use_colors: Color console output

        Returns:
            LoggerInterface: Configured logger
        """
        if logger_type == LoggerType.STANDARD:
            return StandardLogger(
                name=name,
                level=level,
                console_level=console_level,
                file_level=file_level,
                log_file=log_file,
                use_colors=use_colors,
            )
        raise ValueError(f"Unsupported logger type: {logger_type}")

    @classmethod
    def get_logger(
        cls,
        name: str,
        logger_type: LoggerType = LoggerType.STANDARD,
        level: LogLevel = LogLevel.INFO,
        console_level: Optional[LogLevel] = None,
        file_level: Optional[LogLevel] = None,
        log_file: Optional[str] = None,
        use_colors: bool = True,
    ) -> LoggerInterface:
        """Get a cached logger by name, creating it on first use."""
        if name not in cls._loggers:
            cls._loggers[name] = cls.create_logger(
                name=name,
                logger_type=logger_type,
                level=level,
                console_level=console_level,
                file_level=file_level,
                log_file=log_file,
                use_colors=use_colors,
            )
        return cls._loggers[name]

    @classmethod
    def clear(cls) -> None:
        """Forget cached loggers."""
        cls._loggers.clear()
