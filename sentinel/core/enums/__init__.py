"""Core enums package.

Usage:
    from sentinel.core.enums import ErrorCode, Environment
"""

from sentinel.core.enums.environment import Environment
from sentinel.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
