"""Result types for railway-oriented programming.

Operations that can fail return a Result instead of raising. A failed money
addition is an ordinary outcome in a billing fold, so callers branch on the
result rather than catching exceptions.

Usage:
    def check_currency(code: str) -> Result[str, str]:
        if len(code) != 3:
            return Failure(error="Currency code must be 3 characters")
        return Success(value=code)

    match add(a, b):
        case Success(value=total):
            print(total.units, total.nanos)
        case Failure(error=error):
            print(error.code)
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


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure[E]
