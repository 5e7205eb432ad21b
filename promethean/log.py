"""Process-wide logging facility built on the standard logging module."""

from __future__ import annotations

import enum
import logging
import sys
import threading
from typing import Any, ClassVar, Optional

_LOGGER_NAME = "Promethean"
_TEST_LOGGER_NAME = "PrometheanTest"
_PATTERN = "[%(asctime)s.%(msecs)03d] [%(levelname)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogLevel(enum.Enum):
    """Runtime severity threshold."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR


class LogSystem:
    """Thread-safe logger with ``{}``-style message formatting."""

    _instance: ClassVar[Optional["LogSystem"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._level = LogLevel.INFO
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_PATTERN, _DATE_FORMAT))
        self._logger = self._make_logger(_LOGGER_NAME, handler)

    @classmethod
    def instance(cls) -> "LogSystem":
        """Return the shared log system, creating it on first use."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def _make_logger(self, name: str, handler: logging.Handler) -> logging.Logger:
        logger = logging.getLogger(name)
        for existing in list(logger.handlers):
            logger.removeHandler(existing)
        logger.addHandler(handler)
        logger.propagate = False
        logger.setLevel(self._level.value)
        return logger

    @property
    def level(self) -> LogLevel:
        """The current severity threshold."""
        return self._level

    def set_level(self, level: LogLevel) -> None:
        """Change the severity threshold."""
        self._level = LogLevel(level)
        self._logger.setLevel(self._level.value)

    def _log(self, level: LogLevel, fmt: str, args: tuple[Any, ...]) -> None:
        if not self._logger.isEnabledFor(level.value):
            return
        message = fmt.format(*args) if args else fmt
        self._logger.log(level.value, message)

    def debug(self, fmt: str, *args: Any) -> None:
        self._log(LogLevel.DEBUG, fmt, args)

    def info(self, fmt: str, *args: Any) -> None:
        self._log(LogLevel.INFO, fmt, args)

    def warn(self, fmt: str, *args: Any) -> None:
        self._log(LogLevel.WARN, fmt, args)

    def error(self, fmt: str, *args: Any) -> None:
        self._log(LogLevel.ERROR, fmt, args)

    def flush(self) -> None:
        """Flush every handler attached to the logger."""
        for handler in self._logger.handlers:
            handler.flush()

    def set_handler_for_testing(self, handler: logging.Handler) -> None:
        """Route all output to ``handler`` so that it can be inspected."""
        self._logger = self._make_logger(_TEST_LOGGER_NAME, handler)