"""Role entity.

A role is a named bundle of permission slugs, optionally carrying a special
access marker. Roles are immutable value-like entities; they are built from
the persistence layer or directly by hosts and tests.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from sentinel.domain.enums import RoleSpecial


@dataclass(frozen=True, slots=True, kw_only=True)
class Role:
    """Role with its directly granted permissions.

    Attributes:
        slug: Machine name used by checks ("editor").
        name: Display name ("Editor").
        permissions: Permission slugs granted by this role.
        special: Optional access marker overriding permission checks.
        description: Optional free text.
    """

    slug: str
    name: str = ""
    permissions: frozenset[str] = field(default_factory=frozenset)
    special: RoleSpecial | None = None
    description: str | None = None

    @classmethod
    def create(
        cls,
        slug: str,
        permissions: Iterable[str] = (),
        *,
        name: str | None = None,
        special: RoleSpecial | str | None = None,
        description: str | None = None,
    ) -> "Role":
        """Build a role from loose inputs.

        Args:
            slug: Role slug.
            permissions: Any iterable of permission slugs.
            name: Display name, defaults to the slug.
            special: RoleSpecial or its string value.
            description: Optional free text.

        Returns:
            Role: Immutable role.

        Raises:
            ValueError: If special is not a valid RoleSpecial value.
        """
        return cls(
            slug=slug,
            name=name if name is not None else slug,
            permissions=frozenset(permissions),
            special=RoleSpecial(special) if special is not None else None,
            description=description,
        )
