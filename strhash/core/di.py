"""
Dependency injection helpers for strhash.

Lets library modules ask for a service without requiring the application
to have called bootstrap() first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")


def resolve_or_default(
    interface: type[T],
    default_factory: Callable[[], T],
) -> T:
    """Resolve a service from the container or build a default.

    Args:
        interface: The interface type to resolve
        default_factory: Callable that creates the fallback implementation

    Returns:
        Registered instance, or the default when nothing is registered

    Example:
        >>> from strhash.core.interfaces.logger import ILogger
        >>> from strhash.services.logging import NullLogger
        >>> logger = resolve_or_default(ILogger, NullLogger)
    """
    from .container import get_container

    instance = get_container().try_resolve(interface)
    if instance is not None:
        return instance
    return default_factory()
