"""Domain value objects.

Immutable values exchanged with the money core.
"""

from src.domain.value_objects.money import (
    BILLION,
    INT64_MAX,
    INT64_MIN,
    MAX_NANOS,
    Money,
)

__all__ = [
    "BILLION",
    "INT64_MAX",
    "INT64_MIN",
    "MAX_NANOS",
    "Money",
]
