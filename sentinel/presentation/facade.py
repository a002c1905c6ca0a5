"""Facade over the registry's authorization service.

The facade is what templates, route dependencies and host code hold on to.
Every call resolves the ``"sentinel"`` singleton from the registry, so all
callers share one service instance.

Usage:
    sentinel = SentinelFacade(registry)
    if sentinel.can("edit-post"):
        ...
"""

from typing import Any

from sentinel.core.constants import SERVICE_KEY
from sentinel.core.container.registry import ServiceRegistry
from sentinel.domain.protocols.authorization_protocol import AuthorizationProtocol
from sentinel.domain.protocols.principal_protocol import PermissionQuery


class SentinelFacade:
    """Typed entry point forwarding to the registered AuthorizationProtocol."""

    def __init__(self, registry: ServiceRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> ServiceRegistry:
        """Registry the facade resolves from."""
        return self._registry

    def resolve(self) -> AuthorizationProtocol:
        """Return the registry's authorization service singleton."""
        service: AuthorizationProtocol = self._registry.resolve(SERVICE_KEY)
        return service

    def can(self, permission: PermissionQuery) -> bool:
        """Forward to AuthorizationProtocol.can."""
        return self.resolve().can(permission)

    def can_at_least(self, permissions: PermissionQuery) -> bool:
        """Forward to AuthorizationProtocol.can_at_least."""
        return self.resolve().can_at_least(permissions)

    def is_role(self, role: str) -> bool:
        """Forward to AuthorizationProtocol.is_role."""
        return self.resolve().is_role(role)

    def forward(self, method_name: str, /, *args: Any, **kwargs: Any) -> Any:
        """Call any method of the service by name and return its result.

        For service methods beyond the three typed queries. Nothing is
        caught: a missing method raises AttributeError, and errors from the
        service propagate unchanged.
        """
        return getattr(self.resolve(), method_name)(*args, **kwargs)
