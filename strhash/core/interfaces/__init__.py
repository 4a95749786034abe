"""
Interfaces for strhash services resolved through the service container.
"""

from .logger import ILogger

__all__ = ["ILogger"]
