"""SQLAlchemy models for the role/permission schema."""

from sentinel.infrastructure.persistence.models.role import (
    Permission,
    Role,
    permission_role,
    role_user,
)

__all__ = ["Permission", "Role", "permission_role", "role_user"]
