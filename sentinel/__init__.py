"""Role and permission checks for FastAPI applications and Jinja2 templates.

Usage:
    from sentinel import SentinelServiceProvider, Principal, Role

    facade = SentinelServiceProvider().install(app, templates, user_loader=load_user)
    facade.can("edit-post")
"""

from sentinel.core.constants import SERVICE_KEY
from sentinel.core.container import ServiceRegistry
from sentinel.core.exceptions import (
    BindingNotFoundError,
    DirectiveConflictError,
    SentinelError,
)
from sentinel.domain.entities import Principal, Role
from sentinel.domain.enums import RoleSpecial
from sentinel.domain.protocols import (
    AuthorizationProtocol,
    GuardProtocol,
    PrincipalProtocol,
)
from sentinel.infrastructure.auth import ContextGuard, acting_as
from sentinel.infrastructure.authorization import Sentinel
from sentinel.presentation import (
    SentinelFacade,
    SentinelMiddleware,
    SentinelServiceProvider,
    get_sentinel,
    require_any_permission,
    require_permission,
    require_role,
)

__version__ = "0.1.0"

__all__ = [
    "AuthorizationProtocol",
    "BindingNotFoundError",
    "ContextGuard",
    "DirectiveConflictError",
    "GuardProtocol",
    "Principal",
    "PrincipalProtocol",
    "Role",
    "RoleSpecial",
    "SERVICE_KEY",
    "Sentinel",
    "SentinelError",
    "SentinelFacade",
    "SentinelMiddleware",
    "SentinelServiceProvider",
    "ServiceRegistry",
    "acting_as",
    "get_sentinel",
    "require_any_permission",
    "require_permission",
    "require_role",
]
