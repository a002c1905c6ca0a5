"""Jinja2 integration: authorization block tags.

Usage:
    from fastapi.templating import Jinja2Templates
    from sentinel.infrastructure.templating import register_directives

    templates = Jinja2Templates(directory="templates")
    register_directives(templates.env, sentinel_facade)
"""

from sentinel.infrastructure.templating.binder import (
    find_conflicts,
    register_directives,
)
from sentinel.infrastructure.templating.directives import (
    DIRECTIVE_BINDINGS,
    DirectiveBinding,
    directive_tokens,
)
from sentinel.infrastructure.templating.extension import SentinelExtension

__all__ = [
    "DIRECTIVE_BINDINGS",
    "DirectiveBinding",
    "SentinelExtension",
    "directive_tokens",
    "find_conflicts",
    "register_directives",
]
