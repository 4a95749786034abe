"""
Logger implementations for strhash diagnostics.

StrhashLogger wraps stdlib logging with an optional stderr handler and an
optional rotating file under ~/.strhash. NullLogger is what library code
falls back to when nothing has been bootstrapped.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, ClassVar

from ..core.interfaces.logger import ILogger

DEFAULT_LOG_FILE = Path.home() / ".strhash" / "strhash.log"


class StrhashLogger(ILogger):
    """
    ILogger backed by a named stdlib logger.

    The underlying logger stays at DEBUG and does not propagate; each
    handler carries the configured threshold.
    """

    MAX_FILE_SIZE = 5 * 1024 * 1024  # 5MB
    BACKUP_COUNT = 2

    LEVEL_MAP: ClassVar[dict[str, int]] = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
    }

    def __init__(
        self,
        name: str = "strhash",
        level: str = "warning",
        console_enabled: bool = False,
        file_enabled: bool = False,
        log_file: Path | None = None,
    ) -> None:
        """
        Initialize logger.

        Args:
            name: Logger name
            level: Initial log level (debug, info, warning, error)
            console_enabled: Attach a stderr handler
            file_enabled: Attach a rotating file handler
            log_file: File handler target (defaults to ~/.strhash/strhash.log)
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)
        for handler in list(self._logger.handlers):
            handler.close()
            self._logger.removeHandler(handler)
        self._logger.propagate = False

        self._handlers: list[logging.Handler] = []
        self.log_file = log_file or DEFAULT_LOG_FILE

        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        log_level = self._to_level(level)

        if console_enabled:
            console = logging.StreamHandler(sys.stderr)
            self._attach(console, formatter, log_level)

        if file_enabled:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                self.log_file,
                maxBytes=self.MAX_FILE_SIZE,
                backupCount=self.BACKUP_COUNT,
                encoding="utf-8",
            )
            self._attach(file_handler, formatter, log_level)

    def _attach(self, handler: logging.Handler, formatter: logging.Formatter, level: int) -> None:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        self._logger.addHandler(handler)
        self._handlers.append(handler)

    @classmethod
    def _to_level(cls, level: str) -> int:
        return cls.LEVEL_MAP.get(level.lower(), logging.WARNING)

    @property
    def handlers(self) -> list[logging.Handler]:
        """Handlers attached by this logger."""
        return list(self._handlers)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)

    def set_level(self, level: str) -> None:
        lvl = self._to_level(level)
        for handler in self._handlers:
            handler.setLevel(lvl)

    def close(self) -> None:
        """Detach and close every handler this logger added."""
        for handler in self._handlers:
            self._logger.removeHandler(handler)
            handler.close()
        self._handlers.clear()


class NullLogger(ILogger):
    """Logger that discards everything."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def set_level(self, level: str) -> None:
        pass
