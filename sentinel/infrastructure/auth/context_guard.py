"""Request-context guard.

The principal for the current request is held in a ContextVar. The
middleware sets it when a request starts and resets it when the request
ends, so one guard instance serves every request without sharing state
between them.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from sentinel.domain.protocols.principal_protocol import PrincipalProtocol

principal_context: ContextVar[PrincipalProtocol | None] = ContextVar(
    "sentinel_principal", default=None
)


def get_current_principal() -> PrincipalProtocol | None:
    """Return the principal bound to the current context, if any."""
    return principal_context.get()


@contextmanager
def acting_as(principal: PrincipalProtocol | None) -> Iterator[None]:
    """Bind a principal for the duration of the block.

    Used by the middleware and by background jobs or tests that need
    decisions outside of an HTTP request.

    Example:
        with acting_as(Principal.with_roles(user.id, roles)):
            templates.get_template("report.html").render()
    """
    token = principal_context.set(principal)
    try:
        yield
    finally:
        principal_context.reset(token)


class ContextGuard:
    """Guard reading the principal bound to the current context."""

    def check(self) -> bool:
        """Return True when a principal is bound."""
        return principal_context.get() is not None

    def user(self) -> PrincipalProtocol | None:
        """Return the bound principal or None."""
        return principal_context.get()
