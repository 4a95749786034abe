"""
Service implementations registered in the strhash container.
"""

from .logging import NullLogger, StrhashLogger

__all__ = ["NullLogger", "StrhashLogger"]
