"""Publishing of package assets (migrations) into the host application."""

from sentinel.infrastructure.publishing.publisher import (
    PublishError,
    PublishMapping,
    Publisher,
)

__all__ = ["PublishError", "PublishMapping", "Publisher"]
