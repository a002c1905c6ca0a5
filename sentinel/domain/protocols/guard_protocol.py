"""Guard protocol (port) supplying the current principal.

The guard is the authentication boundary: it answers "who is making this
request". Authentication itself (sessions, JWT, API keys) is the host's
concern; the guard only exposes the result.

Implementations:
    - ContextGuard: principal bound per request by SentinelMiddleware
"""

from typing import Protocol

from sentinel.domain.protocols.principal_protocol import PrincipalProtocol


class GuardProtocol(Protocol):
    """Protocol for authentication guards."""

    def check(self) -> bool:
        """Return True when a principal is authenticated for the current request."""
        ...

    def user(self) -> PrincipalProtocol | None:
        """Return the current principal, or None when unauthenticated."""
        ...
