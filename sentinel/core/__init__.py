"""Core shared kernel.

Result types, error data classes, exceptions, settings and the container.
The core module has NO dependencies on other package layers.
"""

from sentinel.core.enums import ErrorCode
from sentinel.core.errors import (
    DomainError,
    NotFoundError,
    ValidationError,
)
from sentinel.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
]
