"""Pytest configuration and shared fixtures.

Settings are read once at import time, so the environment is pinned to
"testing" before any sentinel module is imported (JSON log rendering).
"""

import os

os.environ.setdefault("SENTINEL_ENVIRONMENT", "testing")

from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402

from sentinel.core.container import ServiceRegistry, get_logger  # noqa: E402
from sentinel.domain.entities import Principal, Role  # noqa: E402
from sentinel.domain.enums import RoleSpecial  # noqa: E402


class RecordingService:
    """AuthorizationProtocol stand-in recording every query it receives."""

    def __init__(
        self,
        permissions: set[str] | None = None,
        roles: set[str] | None = None,
    ) -> None:
        self.permissions = permissions or set()
        self.roles = roles or set()
        self.calls: list[tuple[str, object]] = []

    def can(self, permission):
        self.calls.append(("can", permission))
        if isinstance(permission, str):
            return permission in self.permissions
        return set(permission) <= self.permissions

    def can_at_least(self, permissions):
        self.calls.append(("can_at_least", permissions))
        if isinstance(permissions, str):
            permissions = [permissions]
        return bool(self.permissions.intersection(permissions))

    def is_role(self, role):
        self.calls.append(("is_role", role))
        return role in self.roles


@pytest.fixture(scope="session", autouse=True)
def _bind_logger_stream():
    """Build the process logger once, against the captured stdout.

    CliRunner swaps sys.stdout while a command runs; a logger first built
    inside a command would keep writing to that temporary stream.
    """
    return get_logger()


@pytest.fixture
def mock_logger():
    """Structured logger mock (LoggerProtocol)."""
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def registry():
    """Fresh service registry."""
    return ServiceRegistry()


@pytest.fixture
def recording_service():
    """Service granting edit-post and the editor role."""
    return RecordingService(permissions={"edit-post"}, roles={"editor"})


@pytest.fixture
def editor():
    """Principal with the editor role (edit-post, view-post)."""
    return Principal.with_roles(
        "user-1",
        [Role.create("editor", ["edit-post", "view-post"], name="Editor")],
    )


@pytest.fixture
def admin():
    """Principal with an all-access role."""
    return Principal.with_roles(
        "user-2",
        [Role.create("admin", special=RoleSpecial.ALL_ACCESS)],
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "api: HTTP-level tests against a FastAPI app")
