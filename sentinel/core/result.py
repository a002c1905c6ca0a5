"""Result types for railway-oriented programming.

Operations with expected failure modes (publishing files, loading a
principal) return a Result instead of raising, so callers handle both
branches explicitly.

Usage:
    result = publisher.publish("migrations")
    match result:
        case Success(value=paths):
            print(f"Published {len(paths)} file(s)")
        case Failure(error=err):
            print(f"Error: {err.message}")
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
