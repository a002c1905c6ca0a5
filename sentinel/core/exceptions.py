"""Exceptions raised by the integration glue.

These cover boot-time faults only (container resolution, directive
registration). They are never caught inside the package: failures abort
application startup or the current render, as the host framework decides.
"""


class SentinelError(Exception):
    """Base class for all exceptions raised by this package."""


class BindingNotFoundError(SentinelError, LookupError):
    """No binding registered under the requested key."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"No binding registered for key '{key}'")


class DirectiveConflictError(SentinelError, ValueError):
    """Directive tokens clash with tags already known to the template engine."""

    def __init__(self, tokens: list[str]) -> None:
        self.tokens = tokens
        super().__init__(
            "Template directive(s) already registered: " + ", ".join(tokens)
        )
