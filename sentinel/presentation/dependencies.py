"""FastAPI dependencies for role/permission checks on routes.

Route-level counterpart of the template tags: each factory returns a
dependency that raises 403 when the current principal fails the check.

Usage:
    @router.get("/posts/{post_id}/edit")
    async def edit_post(
        _: Annotated[None, Depends(require_permission("edit-post"))],
    ):
        ...

    @router.get("/admin")
    async def admin_home(
        _: Annotated[None, Depends(require_role("admin"))],
    ):
        ...
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from sentinel.core.config import Settings, settings
from sentinel.presentation.facade import SentinelFacade


def get_sentinel(request: Request) -> SentinelFacade:
    """Return the facade installed on the application.

    Raises:
        RuntimeError: If SentinelServiceProvider.install() was not called.
    """
    facade: SentinelFacade | None = getattr(request.app.state, "sentinel", None)
    if facade is None:
        raise RuntimeError(
            "Sentinel is not installed on this application. "
            "Call SentinelServiceProvider().install(app) at startup."
        )
    return facade


def get_sentinel_settings(request: Request) -> Settings:
    """Return the settings the application installed Sentinel with.

    Falls back to the process settings when install() stored none.
    """
    installed: Settings | None = getattr(request.app.state, "sentinel_settings", None)
    return installed if installed is not None else settings


def require_permission(*permissions: str) -> Callable[..., Awaitable[None]]:
    """Create a dependency that requires every listed permission.

    Args:
        *permissions: Permission slugs, all required.

    Returns:
        Dependency function raising 403 when any permission is missing.

    Raises:
        ValueError: If no permission is given.
    """
    if not permissions:
        raise ValueError("require_permission() needs at least one permission")
    query = permissions[0] if len(permissions) == 1 else list(permissions)

    async def permission_checker(
        sentinel: Annotated[SentinelFacade, Depends(get_sentinel)],
        config: Annotated[Settings, Depends(get_sentinel_settings)],
    ) -> None:
        if not sentinel.can(query):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"{config.forbidden_detail}: {', '.join(permissions)}",
            )

    return permission_checker


def require_any_permission(*permissions: str) -> Callable[..., Awaitable[None]]:
    """Create a dependency that requires at least one listed permission.

    Args:
        *permissions: Permission slugs, any one suffices.

    Returns:
        Dependency function raising 403 when none is held.

    Raises:
        ValueError: If no permission is given.
    """
    if not permissions:
        raise ValueError("require_any_permission() needs at least one permission")

    async def permission_checker(
        sentinel: Annotated[SentinelFacade, Depends(get_sentinel)],
        config: Annotated[Settings, Depends(get_sentinel_settings)],
    ) -> None:
        if not sentinel.can_at_least(list(permissions)):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=(
                    f"{config.forbidden_detail}: requires one of "
                    f"[{', '.join(permissions)}]"
                ),
            )

    return permission_checker


def require_role(role: str) -> Callable[..., Awaitable[None]]:
    """Create a dependency that requires a role.

    Args:
        role: Role slug.

    Returns:
        Dependency function raising 403 when the role is not assigned.
    """

    async def role_checker(
        sentinel: Annotated[SentinelFacade, Depends(get_sentinel)],
    ) -> None:
        if not sentinel.is_role(role):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Role '{role}' required",
            )

    return role_checker
