"""Role, permission and pivot table models.

Tables:
    roles            Named role with an optional special access marker
    permissions      Named permission identified by its slug
    permission_role  Permissions granted to each role
    role_user        Roles assigned to each host user

The host application owns its user table, so ``role_user.user_id`` carries
no foreign key. The shipped Alembic revision creates exactly these tables.
"""

from sqlalchemy import Column, ForeignKey, Index, String, Table, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sentinel.infrastructure.persistence.base import BaseModel, BaseMutableModel

permission_role = Table(
    "permission_role",
    BaseModel.metadata,
    Column(
        "permission_id",
        Uuid,
        ForeignKey("permissions.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "role_id",
        Uuid,
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

role_user = Table(
    "role_user",
    BaseModel.metadata,
    Column(
        "role_id",
        Uuid,
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("user_id", Uuid, primary_key=True),
    Index("idx_role_user_user_id", "user_id"),
)


class Permission(BaseMutableModel):
    """Permission row.

    Fields:
        name: Display name ("Edit posts")
        slug: Unique machine name checked by templates ("edit-post")
        description: Optional free text
    """

    __tablename__ = "permissions"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class Role(BaseMutableModel):
    """Role row with its granted permissions.

    Fields:
        name: Display name ("Editor")
        slug: Unique machine name ("editor")
        description: Optional free text
        special: 'all-access', 'no-access' or NULL
    """

    __tablename__ = "roles"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    special: Mapped[str | None] = mapped_column(
        String(20),
        nullable=True,
        comment="Special access marker: 'all-access', 'no-access' or NULL",
    )

    permissions: Mapped[list[Permission]] = relationship(
        secondary=permission_role,
        lazy="selectin",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Role(slug={self.slug}, special={self.special})>"
