"""Default principal implementing role/permission decisions.

Decision policy:
    - A role marked NO_ACCESS denies every permission check.
    - Otherwise a role marked ALL_ACCESS grants every permission check.
    - Otherwise permissions are the union of the principal's roles.
    - ``can`` with a collection requires every slug; ``can_at_least``
      requires one. An empty collection is never satisfied.
    - ``is_role`` compares role slugs only; special markers do not apply.

Hosts with a different policy provide their own object satisfying
PrincipalProtocol; nothing else in the package depends on this class.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from sentinel.domain.entities.role import Role
from sentinel.domain.enums import RoleSpecial
from sentinel.domain.protocols.principal_protocol import PermissionQuery


def _as_slugs(query: PermissionQuery) -> tuple[str, ...]:
    if isinstance(query, str):
        return (query,)
    return tuple(query)


@dataclass(frozen=True, slots=True, kw_only=True)
class Principal:
    """Authenticated actor with assigned roles.

    Attributes:
        identifier: Host-side user identifier (UUID, int or str).
        roles: Roles assigned to the principal.
    """

    identifier: Any
    roles: tuple[Role, ...] = field(default_factory=tuple)

    @classmethod
    def with_roles(cls, identifier: Any, roles: Iterable[Role]) -> "Principal":
        """Build a principal from any iterable of roles."""
        return cls(identifier=identifier, roles=tuple(roles))

    @property
    def permissions(self) -> frozenset[str]:
        """Union of permission slugs granted by all roles."""
        granted: set[str] = set()
        for role in self.roles:
            granted.update(role.permissions)
        return frozenset(granted)

    @property
    def role_slugs(self) -> frozenset[str]:
        """Slugs of all assigned roles."""
        return frozenset(role.slug for role in self.roles)

    def _special(self) -> RoleSpecial | None:
        specials = {role.special for role in self.roles if role.special is not None}
        if RoleSpecial.NO_ACCESS in specials:
            return RoleSpecial.NO_ACCESS
        if RoleSpecial.ALL_ACCESS in specials:
            return RoleSpecial.ALL_ACCESS
        return None

    def can(self, permission: PermissionQuery) -> bool:
        """True iff every requested permission is held."""
        special = self._special()
        if special is RoleSpecial.NO_ACCESS:
            return False
        if special is RoleSpecial.ALL_ACCESS:
            return True

        requested = _as_slugs(permission)
        if not requested:
            return False
        return self.permissions.issuperset(requested)

    def can_at_least(self, permissions: PermissionQuery) -> bool:
        """True iff at least one requested permission is held."""
        special = self._special()
        if special is RoleSpecial.NO_ACCESS:
            return False
        if special is RoleSpecial.ALL_ACCESS:
            return True

        return not self.permissions.isdisjoint(_as_slugs(permissions))

    def is_role(self, role: str) -> bool:
        """True iff a role with this slug is assigned."""
        return role in self.role_slugs
