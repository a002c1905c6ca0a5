"""Middleware binding the request's principal for the guard.

The host supplies ``user_loader``: given the request, it returns the
authenticated principal (or None). The principal is bound in the context
the ContextGuard reads for the duration of the request.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import TypeAlias

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from sentinel.domain.protocols.principal_protocol import PrincipalProtocol
from sentinel.infrastructure.auth.context_guard import principal_context

UserLoader: TypeAlias = Callable[
    [Request], Awaitable[PrincipalProtocol | None] | PrincipalProtocol | None
]


class SentinelMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that binds the current principal per request."""

    def __init__(self, app: ASGIApp, user_loader: UserLoader) -> None:
        super().__init__(app)
        self._user_loader = user_loader

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Resolve the principal, run the request, then unbind it.

        Args:
            request (Request): Incoming request.
            call_next (Callable[[Request], Awaitable[Response]]): Next handler.

        Returns:
            Response: Downstream response, unchanged.
        """
        principal = self._user_loader(request)
        if inspect.isawaitable(principal):
            principal = await principal

        token = principal_context.set(principal)
        try:
            return await call_next(request)
        finally:
            # Clear context after request to prevent leakage
            principal_context.reset(token)
