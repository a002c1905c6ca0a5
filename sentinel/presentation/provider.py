"""Service provider wiring Sentinel into a FastAPI application.

Boot sequence:
    1. register(): bind the guard (unless the host bound one) and the
       ``"sentinel"`` singleton on the registry. Nothing is built yet.
    2. boot(): register the publishable migrations and, when a template
       environment is given, the authorization block tags.
    3. install(): run both on a FastAPI app, store the registry, the facade
       and the settings on ``app.state`` and add the principal middleware.

Usage:
    from fastapi import FastAPI
    from fastapi.templating import Jinja2Templates
    from sentinel import SentinelServiceProvider

    app = FastAPI()
    templates = Jinja2Templates(directory="templates")

    async def load_user(request: Request) -> Principal | None:
        ...

    SentinelServiceProvider().install(app, templates, user_loader=load_user)
"""

from typing import TYPE_CHECKING, Any

from jinja2 import Environment

from sentinel.core.config import Settings, get_settings
from sentinel.core.constants import (
    GUARD_KEY,
    LOGGER_KEY,
    MIGRATIONS_SOURCE,
    MIGRATIONS_TAG,
    SERVICE_KEY,
)
from sentinel.core.container import (
    ServiceRegistry,
    build_logger,
    get_logger,
    make_guard,
    make_sentinel,
)
from sentinel.infrastructure.publishing import Publisher
from sentinel.infrastructure.templating import register_directives
from sentinel.presentation.facade import SentinelFacade
from sentinel.presentation.middleware import SentinelMiddleware

if TYPE_CHECKING:
    from fastapi import FastAPI

    from sentinel.presentation.middleware import UserLoader


class SentinelServiceProvider:
    """Registers and boots the authorization service.

    Attributes:
        defer: Always False. The binding is registered eagerly at
            application build time; the service itself is still built
            lazily on first resolution.
    """

    defer = False

    def __init__(
        self,
        registry: ServiceRegistry | None = None,
        *,
        publisher: Publisher | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize provider.

        Args:
            registry: Registry to bind into; a fresh one by default.
            publisher: Publisher receiving the migrations; a fresh one by default.
            settings: Settings; the cached process settings by default.
                Given settings also drive the provider's logger and the 403
                detail of the route dependencies.
        """
        self.registry = registry if registry is not None else ServiceRegistry()
        if settings is None:
            self.settings = get_settings()
            self._logger = get_logger()
        else:
            self.settings = settings
            self._logger = build_logger(settings)
        self.publisher = (
            publisher if publisher is not None else Publisher(logger=self._logger)
        )
        self.facade = SentinelFacade(self.registry)

    def register(self) -> None:
        """Bind the guard, the logger and the ``"sentinel"`` singleton."""
        self.registry.singleton_if(GUARD_KEY, make_guard)
        self.registry.singleton_if(LOGGER_KEY, lambda _registry: self._logger)
        self.registry.singleton(SERVICE_KEY, make_sentinel)
        self._logger.info("sentinel_registered", provides=self.provides())

    def boot(self, templates: Any | None = None) -> None:
        """Register publishable migrations and template directives.

        Args:
            templates: Jinja2 Environment, or any object exposing one as
                ``.env`` (FastAPI's Jinja2Templates). Optional.

        Raises:
            DirectiveConflictError: If a directive token is already a tag.
        """
        self.publisher.publishes(
            {MIGRATIONS_SOURCE: self.settings.migrations_path},
            tag=MIGRATIONS_TAG,
        )

        if templates is not None:
            self.register_template_directives(templates)

    def register_template_directives(self, templates: Any) -> Environment:
        """Install the block tags on a template environment.

        Returns:
            Environment: The environment the tags were installed on.
        """
        environment: Environment = getattr(templates, "env", templates)
        register_directives(environment, self.facade, logger=self._logger)
        return environment

    def provides(self) -> list[str]:
        """Return the registry keys this provider binds."""
        return [SERVICE_KEY]

    def install(
        self,
        app: "FastAPI",
        templates: Any | None = None,
        *,
        user_loader: "UserLoader | None" = None,
    ) -> SentinelFacade:
        """Register, boot and attach Sentinel to a FastAPI application.

        Must run before the application starts serving (middleware cannot
        be added afterwards).

        Args:
            app: FastAPI application.
            templates: Optional Jinja2Templates or Environment.
            user_loader: Callable (sync or async) returning the request's
                principal. Without it the host must bind principals itself
                (e.g. with ``acting_as``) or register its own guard.

        Returns:
            SentinelFacade: Also stored as ``app.state.sentinel``.
        """
        self.register()
        self.boot(templates)

        app.state.sentinel_registry = self.registry
        app.state.sentinel_publisher = self.publisher
        app.state.sentinel_settings = self.settings
        app.state.sentinel = self.facade

        if user_loader is not None:
            app.add_middleware(SentinelMiddleware, user_loader=user_loader)

        return self.facade
