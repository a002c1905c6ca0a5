"""PrincipalRepository - SQLAlchemy implementation.

Adapter for hexagonal architecture.
Loads a user's roles (with their permissions) and maps them to the domain
Principal used by the guard.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from sentinel.domain.entities import Principal, Role
from sentinel.infrastructure.persistence.models.role import (
    Role as RoleModel,
    role_user,
)


class PrincipalRepository:
    """Read-only loader of principals from the role/permission tables.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with get_database().get_session() as session:
        ...     principal = await PrincipalRepository(session).find_by_user_id(user_id)
        ...     principal.can("edit-post")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_user_id(self, user_id: UUID) -> Principal:
        """Load the principal for a host user.

        A user without role assignments yields a principal with no roles,
        which every permission and role check denies.

        Args:
            user_id: Host user's UUID.

        Returns:
            Principal with all assigned roles.
        """
        stmt = (
            select(RoleModel)
            .join(role_user, role_user.c.role_id == RoleModel.id)
            .where(role_user.c.user_id == user_id)
            .options(selectinload(RoleModel.permissions))
            .order_by(RoleModel.slug)
        )
        result = await self.session.execute(stmt)
        role_models = result.scalars().all()

        return Principal.with_roles(
            user_id, [self._to_domain(model) for model in role_models]
        )

    def _to_domain(self, model: RoleModel) -> Role:
        """Map a role row to the domain Role.

        Args:
            model: Database role with permissions loaded.

        Returns:
            Role: Immutable domain role.
        """
        return Role.create(
            model.slug,
            (permission.slug for permission in model.permissions),
            name=model.name,
            special=model.special,
            description=model.description,
        )
