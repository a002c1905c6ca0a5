"""Repository implementations (SQLAlchemy)."""

from sentinel.infrastructure.persistence.repositories.principal_repository import (
    PrincipalRepository,
)

__all__ = ["PrincipalRepository"]
