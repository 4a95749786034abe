"""
Logger interface for strhash diagnostics.

Digest operations report what they did (algorithm, input size) through this
interface so the library stays silent unless the application wires up a
real logger. Command results are printed by the CLI, not logged.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """
    Diagnostic logging contract.

    Implementations must never be handed secret key material; callers log
    lengths and algorithm names only.
    """

    @abstractmethod
    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a debug-level message."""

    @abstractmethod
    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log an info-level message."""

    @abstractmethod
    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a warning-level message."""

    @abstractmethod
    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log an error-level message."""

    @abstractmethod
    def set_level(self, level: str) -> None:
        """
        Change the threshold of every attached handler.

        Args:
            level: One of 'debug', 'info', 'warning', 'error'
        """
