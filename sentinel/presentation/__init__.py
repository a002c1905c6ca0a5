"""Presentation layer: provider, facade, middleware and route dependencies."""

from sentinel.presentation.dependencies import (
    get_sentinel,
    get_sentinel_settings,
    require_any_permission,
    require_permission,
    require_role,
)
from sentinel.presentation.facade import SentinelFacade
from sentinel.presentation.middleware import SentinelMiddleware
from sentinel.presentation.provider import SentinelServiceProvider

__all__ = [
    "SentinelFacade",
    "SentinelMiddleware",
    "SentinelServiceProvider",
    "get_sentinel",
    "get_sentinel_settings",
    "require_any_permission",
    "require_permission",
    "require_role",
]
