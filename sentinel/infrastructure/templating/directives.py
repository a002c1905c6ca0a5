"""Template directive bindings.

Each binding pairs an opening tag and its closing tag with the
authorization query evaluated when the block renders:

    {% can 'edit-post' %} ... {% endcan %}              -> can('edit-post')
    {% canatleast ['a', 'b'] %} ... {% endcanatleast %} -> can_at_least(['a', 'b'])
    {% role 'editor' %} ... {% endrole %}               -> is_role('editor')
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DirectiveBinding:
    """Open/close tag pair bound to an AuthorizationProtocol method.

    Attributes:
        open_tag: Tag opening the guarded block.
        close_tag: Tag closing the guarded block.
        query: Name of the AuthorizationProtocol method evaluated.
    """

    open_tag: str
    close_tag: str
    query: str

    @property
    def tokens(self) -> tuple[str, str]:
        """Both tag names of the pair."""
        return (self.open_tag, self.close_tag)


DIRECTIVE_BINDINGS: tuple[DirectiveBinding, ...] = (
    DirectiveBinding("can", "endcan", "can"),
    DirectiveBinding("canatleast", "endcanatleast", "can_at_least"),
    DirectiveBinding("role", "endrole", "is_role"),
)

BINDINGS_BY_OPEN_TAG: dict[str, DirectiveBinding] = {
    binding.open_tag: binding for binding in DIRECTIVE_BINDINGS
}

# Statement keywords the Jinja2 parser handles itself, plus their end tags
RESERVED_TAGS: frozenset[str] = frozenset(
    {
        "autoescape",
        "block",
        "call",
        "elif",
        "else",
        "extends",
        "filter",
        "for",
        "from",
        "if",
        "import",
        "include",
        "macro",
        "print",
        "raw",
        "set",
        "with",
        "endautoescape",
        "endblock",
        "endcall",
        "endfilter",
        "endfor",
        "endif",
        "endmacro",
        "endraw",
        "endset",
        "endwith",
    }
)


def directive_tokens() -> list[str]:
    """Return all six directive tokens in registration order."""
    return [token for binding in DIRECTIVE_BINDINGS for token in binding.tokens]
