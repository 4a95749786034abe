"""
Application bootstrap for strhash.

Registers the logger and the hash registry in the service container.
Called at CLI startup; library use works without it.
"""

from pathlib import Path

from ..hashing.registry import HashAlgorithmRegistry
from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger
from .settings import StrhashSettings, load_settings

_initialized = False


def bootstrap(
    settings: StrhashSettings | None = None,
    log_file: Path | None = None,
) -> ServiceContainer:
    """
    Bootstrap the strhash application.

    Called again with settings, re-registers services so the logger follows
    those settings. Called again without settings, returns the container
    unchanged.

    Args:
        settings: Loaded settings; read from config files and env if omitted
        log_file: Override for the log file location

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()
    if _initialized and settings is None:
        return container

    if settings is None:
        settings = load_settings()

    _register_core_services(container, settings, log_file)

    _initialized = True
    return container


def _register_core_services(
    container: ServiceContainer,
    settings: StrhashSettings,
    log_file: Path | None,
) -> None:
    from ..services.logging import StrhashLogger

    def create_logger() -> ILogger:
        return StrhashLogger(
            level=settings.logging.level,
            console_enabled=settings.logging.console,
            file_enabled=settings.logging.file,
            log_file=log_file,
        )

    container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]
    container.register_singleton(StrhashSettings, implementation=settings)
    container.register_singleton(HashAlgorithmRegistry, factory=HashAlgorithmRegistry)


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    ServiceContainer.reset()
    _initialized = False


def is_initialized() -> bool:
    """Check if the application has been bootstrapped."""
    return _initialized
