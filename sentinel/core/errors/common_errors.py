"""Common error classes used across all layers.

Error Types:
- ValidationError: Input validation failures
- NotFoundError: Resource not found

Usage:
    from sentinel.core.errors import NotFoundError
    from sentinel.core.enums import ErrorCode
    from sentinel.core.result import Failure

    return Failure(error=NotFoundError(
        code=ErrorCode.PUBLISH_TAG_NOT_FOUND,
        message="Nothing registered under tag",
        resource_type="publish_tag",
        resource_id=tag,
    ))
"""

from dataclasses import dataclass

from sentinel.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (publish_tag, role, etc.).
        resource_id: Identifier of the resource that was not found.
    """

    resource_type: str
    resource_id: str

