"""
Pydantic models for strhash configuration.
"""

from .base import StrhashBaseModel
from .config import HashConfig, LoggingConfig

__all__ = ["HashConfig", "LoggingConfig", "StrhashBaseModel"]
