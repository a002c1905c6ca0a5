"""Package-wide constants.

Binding keys are part of the public surface: hosts and templates resolve
the authorization service through SERVICE_KEY.
"""

from pathlib import Path

# Registry binding keys
SERVICE_KEY = "sentinel"
GUARD_KEY = "auth.guard"
LOGGER_KEY = "sentinel.logger"

# Publishing
MIGRATIONS_TAG = "migrations"
MIGRATIONS_SOURCE = Path(__file__).resolve().parent.parent / "migrations" / "versions"
