"""Domain entities package.

Usage:
    from sentinel.domain.entities import Principal, Role
"""

from sentinel.domain.entities.principal import Principal
from sentinel.domain.entities.role import Role

__all__ = ["Principal", "Role"]
