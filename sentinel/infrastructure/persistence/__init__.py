"""Database persistence infrastructure.

- Base model for the role/permission tables
- Database connection and session management
- PrincipalRepository loading principals
"""

from sentinel.infrastructure.persistence.base import BaseModel
from sentinel.infrastructure.persistence.database import Database

__all__ = [
    "BaseModel",
    "Database",
]
