"""Principal protocol: the authenticated actor's decision surface.

The authorization service never inspects a principal's roles or permissions
itself. It asks the principal, so the decision policy is whatever the host's
principal implements. The default policy lives in
sentinel.domain.entities.principal.
"""

from collections.abc import Iterable
from typing import Protocol, TypeAlias, runtime_checkable

# A single permission slug or a collection of slugs
PermissionQuery: TypeAlias = str | Iterable[str]


@runtime_checkable
class PrincipalProtocol(Protocol):
    """Decision queries answered by an authenticated principal."""

    def can(self, permission: PermissionQuery) -> bool:
        """True iff the principal holds the permission (all of them, for a collection)."""
        ...

    def can_at_least(self, permissions: PermissionQuery) -> bool:
        """True iff the principal holds at least one of the permissions."""
        ...

    def is_role(self, role: str) -> bool:
        """True iff the principal is assigned the role."""
        ...
