"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (PUBLISH_SOURCE_*, PUBLISH_DESTINATION_*)
- Resource errors (*_NOT_FOUND)
- Publishing errors (PUBLISH_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    PUBLISH_SOURCE_MISSING = "publish_source_missing"
    PUBLISH_DESTINATION_INVALID = "publish_destination_invalid"

    # Resource errors
    PUBLISH_TAG_NOT_FOUND = "publish_tag_not_found"

    # Infrastructure errors
    PUBLISH_COPY_FAILED = "publish_copy_failed"
