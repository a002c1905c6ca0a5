"""Authentication guard adapters."""

from sentinel.infrastructure.auth.context_guard import (
    ContextGuard,
    acting_as,
    get_current_principal,
)

__all__ = ["ContextGuard", "acting_as", "get_current_principal"]
