"""Keyed service registry with lazily built singletons.

The registry is the composition root of the package. One registry instance
lives on the host application (``app.state.sentinel_registry``) and owns the
authorization service bound under ``"sentinel"``. Nothing here is global:
tests and multiple apps in one process each get their own registry.

Usage:
    registry = ServiceRegistry()
    registry.singleton("sentinel", lambda r: Sentinel(guard=r.resolve("auth.guard")))

    service = registry.resolve("sentinel")
    assert service is registry.resolve("sentinel")
"""

from collections.abc import Callable
from threading import RLock
from typing import Any

from sentinel.core.exceptions import BindingNotFoundError

Factory = Callable[["ServiceRegistry"], Any]


class ServiceRegistry:
    """Lazy, memoizing registry of application-scoped services.

    Factories receive the registry so they can resolve their own
    dependencies. A factory runs at most once per key; if it raises, the
    exception propagates and nothing is memoized.
    """

    def __init__(self) -> None:
        self._factories: dict[str, Factory] = {}
        self._instances: dict[str, Any] = {}
        self._lock = RLock()

    def singleton(self, key: str, factory: Factory) -> None:
        """Register a lazily built singleton.

        Re-registering a key replaces the factory and drops any instance
        already built from the previous one.

        Args:
            key: Lookup key.
            factory: Callable building the service from this registry.
        """
        with self._lock:
            self._factories[key] = factory
            self._instances.pop(key, None)

    def singleton_if(self, key: str, factory: Factory) -> bool:
        """Register a singleton only when nothing is bound under key yet.

        Args:
            key: Lookup key.
            factory: Callable building the service from this registry.

        Returns:
            bool: True if the factory was registered.
        """
        with self._lock:
            if self.bound(key):
                return False
            self.singleton(key, factory)
            return True

    def instance(self, key: str, obj: Any) -> None:
        """Register an already built object under key."""
        with self._lock:
            self._factories.pop(key, None)
            self._instances[key] = obj

    def bound(self, key: str) -> bool:
        """Check if key has a factory or an instance."""
        return key in self._factories or key in self._instances

    def resolve(self, key: str) -> Any:
        """Return the singleton for key, building it on first use.

        Args:
            key: Lookup key.

        Returns:
            The memoized service instance.

        Raises:
            BindingNotFoundError: If nothing is registered under key.
        """
        try:
            return self._instances[key]
        except KeyError:
            pass

        # RLock: factories resolve their own dependencies re-entrantly
        with self._lock:
            if key in self._instances:
                return self._instances[key]
            factory = self._factories.get(key)
            if factory is None:
                raise BindingNotFoundError(key)
            service = factory(self)
            self._instances[key] = service
            return service

    def forget(self, key: str) -> None:
        """Drop the memoized instance for key, keeping its factory."""
        with self._lock:
            if key in self._factories:
                self._instances.pop(key, None)

    def keys(self) -> list[str]:
        """Return all bound keys, sorted."""
        return sorted(set(self._factories) | set(self._instances))
