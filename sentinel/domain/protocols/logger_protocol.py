"""LoggerProtocol definition for structured logging.

Implementations MUST emit structured logs (message + key-value context) and
MUST NOT log secrets. Permission and role slugs are safe to log; principal
attributes other than the identifier are not.

Log Levels:
    - DEBUG: Individual authorization decisions
    - INFO: Boot events (bindings registered, directives installed, files published)
    - WARNING: Skipped or degraded operations
    - ERROR: Operation failed, application continues

Usage:
    from sentinel.core.container import get_logger

    logger = get_logger()
    logger.info("directives_registered", tokens=["can", "endcan"])

    request_logger = logger.bind(principal="42")
    request_logger.debug("authorization_decision", query="can", allowed=True)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls MUST be structured: message + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event name (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message.

        Args:
            message: Event name (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message.

        Args:
            message: Event name (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger instance remains unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...
