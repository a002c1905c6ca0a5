"""Special role markers that short-circuit permission checks.

Usage:
    from sentinel.domain.enums import RoleSpecial

    admin = Role(slug="admin", name="Administrator", special=RoleSpecial.ALL_ACCESS)
    banned = Role(slug="banned", name="Banned", special=RoleSpecial.NO_ACCESS)
"""

from enum import Enum


class RoleSpecial(str, Enum):
    """Special access level attached to a role.

    String Enum:
        Values match the ``roles.special`` column of the shipped schema.

    Precedence:
        NO_ACCESS wins over ALL_ACCESS when a principal holds both kinds of
        role. Neither affects role membership checks.
    """

    ALL_ACCESS = "all-access"
    """Every permission check passes."""

    NO_ACCESS = "no-access"
    """Every permission check fails."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all special values as strings.

        Returns:
            list[str]: ['all-access', 'no-access'].
        """
        return [special.value for special in cls]
