"""Jinja2 extension implementing the authorization block tags.

The extension rewrites each guarded block into an ``If`` node whose test
calls back into the extension at render time. The expression after the tag
is parsed as an ordinary Jinja2 expression and handed to the query as is;
the extension never inspects it.

The authorization service is read from ``environment.sentinel`` on every
render, set by register_directives().
"""

from typing import Any

from jinja2 import nodes
from jinja2.ext import Extension
from jinja2.parser import Parser

from sentinel.infrastructure.templating.directives import (
    BINDINGS_BY_OPEN_TAG,
    DIRECTIVE_BINDINGS,
)


class SentinelExtension(Extension):
    """Adds ``can``, ``canatleast`` and ``role`` block tags."""

    tags = {binding.open_tag for binding in DIRECTIVE_BINDINGS}

    def __init__(self, environment: Any) -> None:
        super().__init__(environment)
        environment.extend(sentinel=None)

    def parse(self, parser: Parser) -> nodes.Node:
        token = next(parser.stream)
        binding = BINDINGS_BY_OPEN_TAG[token.value]
        lineno = token.lineno

        argument = parser.parse_expression()
        body = parser.parse_statements(
            ("name:else", f"name:{binding.close_tag}")
        )

        else_: list[nodes.Node] = []
        if next(parser.stream).test("name:else"):
            else_ = parser.parse_statements(
                (f"name:{binding.close_tag}",), drop_needle=True
            )

        test = self.call_method(
            "_check", [nodes.Const(binding.query), argument], lineno=lineno
        )
        return nodes.If(test, body, [], else_, lineno=lineno)

    def _check(self, query: str, argument: Any) -> bool:
        service = self.environment.sentinel  # type: ignore[attr-defined]
        if service is None:
            raise RuntimeError(
                "No authorization service on this environment; "
                "call register_directives() first."
            )
        return bool(getattr(service, query)(argument))
