"""Domain enums package.

Usage:
    from sentinel.domain.enums import RoleSpecial
"""

from sentinel.domain.enums.role_special import RoleSpecial

__all__ = ["RoleSpecial"]
