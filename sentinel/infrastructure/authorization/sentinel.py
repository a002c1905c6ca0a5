"""Sentinel: the authorization service.

Implements AuthorizationProtocol by asking the guard for the current
principal and delegating each query to it. An unauthenticated request is
denied without consulting anything else.

Following hexagonal architecture:
- Infrastructure implements domain protocol (AuthorizationProtocol)
- Decision policy belongs to the principal (PrincipalProtocol)
"""

from collections.abc import Callable
from typing import TYPE_CHECKING

from sentinel.domain.protocols.principal_protocol import (
    PermissionQuery,
    PrincipalProtocol,
)

if TYPE_CHECKING:
    from sentinel.domain.protocols.guard_protocol import GuardProtocol
    from sentinel.domain.protocols.logger_protocol import LoggerProtocol


class Sentinel:
    """Role/permission decision service bound to a guard.

    One instance is shared by the whole application (registry singleton).
    It holds no per-request state; the guard resolves the principal on
    every call.

    Attributes:
        _guard: Guard supplying the current principal.
        _logger: Structured logger.
    """

    def __init__(self, guard: "GuardProtocol", logger: "LoggerProtocol") -> None:
        """Initialize service with dependencies.

        Args:
            guard: Guard supplying the current principal.
            logger: Structured logger.
        """
        self._guard = guard
        self._logger = logger

    @property
    def guard(self) -> "GuardProtocol":
        """Guard this service is bound to."""
        return self._guard

    def user(self) -> PrincipalProtocol | None:
        """Return the current principal, or None when unauthenticated."""
        if not self._guard.check():
            return None
        return self._guard.user()

    def can(self, permission: PermissionQuery) -> bool:
        """Check if the current principal holds the permission(s).

        Args:
            permission: Permission slug or collection of slugs (all required).

        Returns:
            bool: True if allowed, False if denied or unauthenticated.
        """
        return self._decide("can", permission, lambda p: p.can(permission))

    def can_at_least(self, permissions: PermissionQuery) -> bool:
        """Check if the current principal holds at least one permission.

        Args:
            permissions: Permission slug or collection of slugs.

        Returns:
            bool: True if any is held, False otherwise or unauthenticated.
        """
        return self._decide(
            "can_at_least", permissions, lambda p: p.can_at_least(permissions)
        )

    def is_role(self, role: str) -> bool:
        """Check if the current principal is assigned the role.

        Args:
            role: Role slug.

        Returns:
            bool: True if assigned, False otherwise or unauthenticated.
        """
        return self._decide("is_role", role, lambda p: p.is_role(role))

    def _decide(
        self,
        query: str,
        argument: object,
        check: Callable[[PrincipalProtocol], bool],
    ) -> bool:
        principal = self.user()
        if principal is None:
            self._logger.debug(
                "authorization_decision",
                query=query,
                argument=_describe(argument),
                allowed=False,
                authenticated=False,
            )
            return False

        allowed = bool(check(principal))
        self._logger.debug(
            "authorization_decision",
            query=query,
            argument=_describe(argument),
            allowed=allowed,
            authenticated=True,
        )
        return allowed


def _describe(argument: object) -> str | list[str]:
    # Iterables may be one-shot generators; only render known containers
    if isinstance(argument, str):
        return argument
    if isinstance(argument, (list, tuple, set, frozenset)):
        return [str(item) for item in argument]
    return repr(argument)
