"""Container module - Centralized dependency injection.

- registry: ServiceRegistry (keyed lazy singletons)
- infrastructure: logger and database singletons, build_logger
- authorization: guard and Sentinel factories

Usage:
    from sentinel.core.container import ServiceRegistry, get_logger
"""

from sentinel.core.container.authorization import make_guard, make_sentinel
from sentinel.core.container.infrastructure import (
    build_logger,
    get_database,
    get_logger,
)
from sentinel.core.container.registry import ServiceRegistry

__all__ = [
    "ServiceRegistry",
    "build_logger",
    "get_database",
    "get_logger",
    "make_guard",
    "make_sentinel",
]
