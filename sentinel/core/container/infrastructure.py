"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console adapter)
- Database (async SQLAlchemy, optional)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from sentinel.core.config import settings

if TYPE_CHECKING:
    from sentinel.core.config import Settings
    from sentinel.domain.protocols.logger_protocol import LoggerProtocol
    from sentinel.infrastructure.persistence.database import Database


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development/production: ConsoleAdapter (human-readable)
    - testing/ci: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    return build_logger(settings)


def build_logger(config: "Settings") -> "LoggerProtocol":
    """Build a logger for the given settings (not cached).

    Used directly by providers constructed with their own Settings.

    Args:
        config: Settings supplying environment and log level.

    Returns:
        LoggerProtocol: New ConsoleAdapter.
    """
    from sentinel.infrastructure.logging.console_adapter import ConsoleAdapter

    env = (
        config.environment.value
        if hasattr(config.environment, "value")
        else str(config.environment)
    )
    use_json = env in {"testing", "ci"}
    return ConsoleAdapter(use_json=use_json, level=config.log_level)


@lru_cache()
def get_database() -> "Database":
    """Get database manager singleton (app-scoped).

    Returns:
        Database manager instance.

    Raises:
        RuntimeError: If SENTINEL_DATABASE_URL is not configured.
    """
    from sentinel.infrastructure.persistence.database import Database

    if not settings.database_url:
        raise RuntimeError(
            "SENTINEL_DATABASE_URL is not set; configure it to load principals "
            "from the database."
        )
    return Database(database_url=settings.database_url, echo=settings.db_echo)
