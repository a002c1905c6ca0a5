"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from sentinel.domain.protocols import AuthorizationProtocol, GuardProtocol
"""

from sentinel.domain.protocols.authorization_protocol import AuthorizationProtocol
from sentinel.domain.protocols.guard_protocol import GuardProtocol
from sentinel.domain.protocols.logger_protocol import LoggerProtocol
from sentinel.domain.protocols.principal_protocol import (
    PermissionQuery,
    PrincipalProtocol,
)

__all__ = [
    "AuthorizationProtocol",
    "GuardProtocol",
    "LoggerProtocol",
    "PermissionQuery",
    "PrincipalProtocol",
]
