"""Registration of the authorization directives on a Jinja2 environment."""

from typing import TYPE_CHECKING

from jinja2 import Environment

from sentinel.core.exceptions import DirectiveConflictError
from sentinel.infrastructure.templating.directives import (
    RESERVED_TAGS,
    directive_tokens,
)
from sentinel.infrastructure.templating.extension import SentinelExtension

if TYPE_CHECKING:
    from sentinel.domain.protocols.authorization_protocol import AuthorizationProtocol
    from sentinel.domain.protocols.logger_protocol import LoggerProtocol


def find_conflicts(environment: Environment) -> list[str]:
    """Return directive tokens already claimed by Jinja2 or other extensions.

    Args:
        environment: Target environment.

    Returns:
        list[str]: Clashing tokens, sorted. Empty when registration is safe.
    """
    claimed = set(RESERVED_TAGS)
    for identifier, extension in environment.extensions.items():
        if identifier == SentinelExtension.identifier:
            continue
        claimed.update(extension.tags)
    return sorted(claimed.intersection(directive_tokens()))


def register_directives(
    environment: Environment,
    service: "AuthorizationProtocol",
    logger: "LoggerProtocol | None" = None,
) -> None:
    """Install the authorization block tags on a Jinja2 environment.

    Registering again on the same environment only swaps the service.

    Args:
        environment: Jinja2 environment (``Jinja2Templates.env`` in FastAPI).
        service: Object answering can / can_at_least / is_role.
        logger: Optional structured logger.

    Raises:
        DirectiveConflictError: If any of the six tokens is already a tag.
    """
    conflicts = find_conflicts(environment)
    if conflicts:
        raise DirectiveConflictError(conflicts)

    environment.add_extension(SentinelExtension)
    # extend() never overwrites, and the extension seeds the attribute with None
    environment.sentinel = service  # type: ignore[attr-defined]

    if logger is not None:
        logger.info("directives_registered", tokens=directive_tokens())
