"""Authorization service factories.

Factories registered on a ServiceRegistry by SentinelServiceProvider. Each
receives the registry and resolves its own dependencies from it.
"""

from typing import TYPE_CHECKING

from sentinel.core.constants import GUARD_KEY, LOGGER_KEY
from sentinel.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from sentinel.core.container.registry import ServiceRegistry
    from sentinel.domain.protocols.authorization_protocol import AuthorizationProtocol
    from sentinel.domain.protocols.guard_protocol import GuardProtocol


def make_guard(registry: "ServiceRegistry") -> "GuardProtocol":
    """Build the default request-context guard.

    Hosts that authenticate differently bind their own guard under
    GUARD_KEY before the provider registers.

    Returns:
        ContextGuard reading the principal bound by SentinelMiddleware.
    """
    from sentinel.infrastructure.auth.context_guard import ContextGuard

    return ContextGuard()


def make_sentinel(registry: "ServiceRegistry") -> "AuthorizationProtocol":
    """Build the authorization service bound to the registry's guard.

    Logs through the logger bound under LOGGER_KEY when there is one, else
    through the process logger.

    Raises:
        BindingNotFoundError: If no guard is bound (propagated unmodified).
    """
    from sentinel.infrastructure.authorization.sentinel import Sentinel

    logger = registry.resolve(LOGGER_KEY) if registry.bound(LOGGER_KEY) else get_logger()
    return Sentinel(guard=registry.resolve(GUARD_KEY), logger=logger)
