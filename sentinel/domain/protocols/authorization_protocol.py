"""Authorization protocol (port) for role/permission decisions.

This protocol is the contract consumed by templates, route dependencies and
the facade. Infrastructure provides the adapter (Sentinel).

Following hexagonal architecture:
- Domain defines the PORT (this protocol)
- Infrastructure provides the ADAPTER (Sentinel)
- Presentation (templates, FastAPI dependencies) uses the protocol

Usage:
    from sentinel.presentation.dependencies import get_sentinel

    @router.get("/posts/{post_id}/edit")
    def edit_post(sentinel: AuthorizationProtocol = Depends(get_sentinel)):
        if not sentinel.can("edit-post"):
            raise HTTPException(403, "Permission denied")
"""

from typing import Protocol

from sentinel.domain.protocols.principal_protocol import PermissionQuery


class AuthorizationProtocol(Protocol):
    """Protocol for authorization decision services.

    All three methods are pure queries: no side effects, deterministic for a
    fixed principal and a fixed role/permission store.

    Error Handling:
        Decisions return bool. An unauthenticated request is a False
        decision, not an error. Exceptions raised by the principal
        propagate unmodified.
    """

    def can(self, permission: PermissionQuery) -> bool:
        """Check if the current principal holds the permission.

        Args:
            permission: Permission slug, or a collection of slugs that must
                all be held.

        Returns:
            bool: True if allowed, False if denied or unauthenticated.

        Example:
            sentinel.can("edit-post")
            sentinel.can(["edit-post", "publish-post"])
        """
        ...

    def can_at_least(self, permissions: PermissionQuery) -> bool:
        """Check if the current principal holds at least one permission.

        Args:
            permissions: Permission slug or collection of slugs.

        Returns:
            bool: True if any is held, False otherwise or unauthenticated.
        """
        ...

    def is_role(self, role: str) -> bool:
        """Check if the current principal is assigned the role.

        Args:
            role: Role slug.

        Returns:
            bool: True if assigned, False otherwise or unauthenticated.
        """
        ...
