"""Core errors package.

Usage:
    from sentinel.core.errors import DomainError, ValidationError, NotFoundError
"""

from sentinel.core.errors.common_errors import (
    NotFoundError,
    ValidationError,
)
from sentinel.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
]
