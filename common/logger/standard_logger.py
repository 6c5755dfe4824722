# logger/standard_logger.py

"""
Standard library based logger with colored console output and optional file output.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

from colorama import Fore, Style

from .logger_interface import LoggerInterface, LogLevel

_LEVEL_COLORS = {
    logging.DEBUG: Fore.CYAN,
    logging.INFO: Fore.GREEN,
    logging.WARNING: Fore.YELLOW,
    logging.ERROR: Fore.RED,
    logging.CRITICAL: Fore.MAGENTA + Style.BRIGHT,
}

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


class ColoredFormatter(logging.Formatter):
    """Formatter that colors each record by its level."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = _LEVEL_COLORS.get(record.levelno)
        if not color:
            return message
        return f"{color}{message}{Style.RESET_ALL}"


class StandardLogger(LoggerInterface):
    """
    Logger backed by the `logging` module.

    Console and file handlers get their own levels so a service can keep a
    quiet console while writing DEBUG records to its log file.
    """

    def __init__(
        self,
        name: str,
        level: LogLevel = LogLevel.INFO,
        console_level: Optional[LogLevel] = None,
        file_level: Optional[LogLevel] = None,
        log_file: Optional[str] = None,
        use_colors: bool = True,
    ):
        super().__init__(name, level)
        self._logger = logging.getLogger(name)
        self._logger.propagate = False
        self._logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel((console_level or level).value)
        console_handler.setFormatter(
            ColoredFormatter(_FORMAT)
            if use_colors and sys.stdout.isatty()
            else logging.Formatter(_FORMAT)
        )
        self._logger.addHandler(console_handler)

        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
            )
            file_handler.setLevel((file_level or level).value)
            file_handler.setFormatter(logging.Formatter(_FORMAT))
            self._logger.addHandler(file_handler)

        # The logger itself must let through whatever any handler wants
        levels = [level, console_level or level, file_level or level]
        self._logger.setLevel(min(logging.getLevelName(lvl.value) for lvl in levels))

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)

    def critical(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.critical(message, *args, **kwargs)

    def set_level(self, level: LogLevel) -> None:
        self.level = level
        self._logger.setLevel(level.value)
