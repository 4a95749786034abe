"""
Click context object for the strhash CLI.

Holds what every command needs (settings, registry, logger), passed down
the Click command chain via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.bootstrap import bootstrap
from ..core.interfaces.logger import ILogger
from ..core.settings import StrhashSettings, load_settings
from ..hashing.registry import HashAlgorithmRegistry
from ..hashing.types import HashType


@dataclass
class StrhashContext:
    """Per-invocation state shared by CLI commands.

    Attributes:
        settings: Effective configuration
        registry: Algorithm registry used for every digest
        logger: Diagnostic logger
    """

    settings: StrhashSettings
    registry: HashAlgorithmRegistry
    logger: ILogger

    @classmethod
    def create(cls, config_path: Path | None = None) -> StrhashContext:
        """Load settings, bootstrap the container and pull services from it.

        Args:
            config_path: Explicit config file (searched for when omitted)

        Raises:
            ConfigValidationError: If a configured value is invalid
        """
        settings = load_settings(config_path=config_path)
        container = bootstrap(settings)
        logger = container.resolve(ILogger)  # type: ignore[type-abstract]
        if settings.config_error:
            logger.warning("Ignoring config file: %s", settings.config_error)
        return cls(
            settings=settings,
            registry=container.resolve(HashAlgorithmRegistry),
            logger=logger,
        )

    @property
    def default_algorithm(self) -> HashType:
        """Algorithm configured under hash.default_algorithm."""
        return HashType.parse(self.settings.hash.default_algorithm)

    @property
    def key_encoding(self) -> str:
        """Encoding configured under hash.key_encoding."""
        return self.settings.hash.key_encoding
