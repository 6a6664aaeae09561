# daynight/utils/logger.py
import datetime
import sys
from typing import Optional, TextIO


class LogLevel:
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4

    NAMES = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARN",
        ERROR: "ERROR",
        CRITICAL: "CRIT",
    }


class Logger:
    """Process-wide log sink shared by the clock, weather and screen code."""

    _level = LogLevel.INFO
    _stream: Optional[TextIO] = None  # None means sys.stdout at write time

    @classmethod
    def set_level(cls, level: int):
        cls._level = level

    @classmethod
    def get_level(cls) -> int:
        return cls._level

    @classmethod
    def set_stream(cls, stream: Optional[TextIO]):
        """Redirect output, e.g. to an io.StringIO in tests. None restores stdout."""
        cls._stream = stream

    @classmethod
    def is_enabled_for(cls, level: int) -> bool:
        return level >= cls._level

    @classmethod
    def _log(cls, level: int, source: str, message: str):
        if not cls.is_enabled_for(level):
            return
        timestamp = datetime.datetime.now().strftime("%H:%M:%S")
        level_name = LogLevel.NAMES.get(level, "LOG")
        stream = cls._stream if cls._stream is not None else sys.stdout
        # Format: [TIME] [LEVEL] [Source] Message
        print(f"[{timestamp}] [{level_name:<5}] [{source}] {message}", file=stream)

    @classmethod
    def debug(cls, source: str, message: str):
        cls._log(LogLevel.DEBUG, source, message)

    @classmethod
    def info(cls, source: str, message: str):
        cls._log(LogLevel.INFO, source, message)

    @classmethod
    def warning(cls, source: str, message: str):
        cls._log(LogLevel.WARNING, source, message)

    @classmethod
    def error(cls, source: str, message: str):
        cls._log(LogLevel.ERROR, source, message)

    @classmethod
    def critical(cls, source: str, message: str):
        cls._log(LogLevel.CRITICAL, source, message)
