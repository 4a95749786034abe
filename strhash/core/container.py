"""
Dependency injection container for strhash.

Uses dependency-injector providers keyed by interface type, with
singleton and transient lifetimes and test-time overrides.
"""

from collections.abc import Callable
from typing import Optional, TypeVar

from dependency_injector import providers

T = TypeVar("T")


class ServiceContainer:
    """
    Process-wide service container.

    Holds one provider per interface type. Registrations happen during
    bootstrap; resolution is read-only afterwards.
    """

    _instance: Optional["ServiceContainer"] = None

    def __init__(self) -> None:
        self._providers: dict[type, providers.Provider] = {}

    @classmethod
    def get_instance(cls) -> "ServiceContainer":
        """Get the global container instance (singleton)."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the global container (for testing)."""
        cls._instance = None

    def register_singleton(
        self,
        interface: type[T],
        implementation: T | None = None,
        factory: Callable[[], T] | None = None,
    ) -> None:
        """
        Register a singleton service.

        Args:
            interface: The interface type
            implementation: Optional concrete instance
            factory: Optional factory function, called on first resolve

        Raises:
            ValueError: If neither implementation nor factory is given
        """
        if implementation is not None:
            self._providers[interface] = providers.Object(implementation)
        elif factory is not None:
            self._providers[interface] = providers.Singleton(factory)
        else:
            raise ValueError("Must provide either implementation or factory")

    def register_transient(self, interface: type[T], factory: Callable[..., T]) -> None:
        """Register a service that is rebuilt on every resolve."""
        self._providers[interface] = providers.Factory(factory)

    def override(self, interface: type[T], provider: providers.Provider) -> None:
        """Replace the provider for an interface (useful for testing)."""
        self._providers[interface] = provider

    def resolve(self, interface: type[T]) -> T:
        """
        Resolve a service by interface.

        Raises:
            KeyError: If no registration found
        """
        if interface not in self._providers:
            raise KeyError(f"No provider registered for: {interface}")
        return self._providers[interface]()

    def try_resolve(self, interface: type[T]) -> T | None:
        """Resolve a service, returning None if it is not registered."""
        if interface not in self._providers:
            return None
        return self._providers[interface]()


def get_container() -> ServiceContainer:
    """Get the global service container instance."""
    return ServiceContainer.get_instance()


def resolve(interface: type[T]) -> T:
    """Resolve a service from the global container."""
    return get_container().resolve(interface)


def try_resolve(interface: type[T]) -> T | None:
    """Try to resolve a service, returning None if not registered."""
    return get_container().try_resolve(interface)
