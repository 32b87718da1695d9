"""Process-wide logging with a replaceable appender."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity of a log message; higher values are more verbose."""

    OFF = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


class LogAppender(ABC):
    """Destination that receives every message passing the level filter."""

    @abstractmethod
    def write(self, level: LogLevel, message: str) -> None:
        """Emit one message at the given level."""


_PREFIXES = {
    LogLevel.TRACE: "[TRACE] ",
    LogLevel.DEBUG: "[DEBUG] ",
    LogLevel.INFO: "[INFO] ",
    LogLevel.WARNING: "[WARNING] ",
    LogLevel.ERROR: "[ERROR] ",
}


class ConsoleAppender(LogAppender):
    """Prints messages to standard output, prefixed with the level name."""

    def write(self, level: LogLevel, message: str) -> None:
        prefix = _PREFIXES[LogLevel(level)]
        print(f"{prefix}{message}", file=sys.stdout, flush=True)


@dataclass
class _Settings:
    level: LogLevel = LogLevel.INFO
    appender: LogAppender = field(default_factory=ConsoleAppender)


_settings = _Settings()


def set_log_level(level: LogLevel) -> None:
    """Set the most verbose level that is still emitted; OFF silences all."""
    _settings.level = LogLevel(level)


def get_log_level() -> LogLevel:
    """Return the current global log level."""
    return _settings.level


def set_appender(appender: LogAppender) -> None:
    """Replace the appender that receives all log messages."""
    _settings.appender = appender


def log(level: LogLevel, message: str) -> None:
    """Emit a message if its level passes the global filter."""
    current = _settings.level
    if current is not LogLevel.OFF and LogLevel(level) <= current:
        _settings.appender.write(LogLevel(level), message)