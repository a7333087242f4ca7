"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Money validation errors (INVALID_*, *_MISMATCH, *_OUT_OF_RANGE)
- Money arithmetic errors (*_OVERFLOW)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Money validation errors
    INVALID_CURRENCY_CODE = "invalid_currency_code"
    MONEY_SIGN_MISMATCH = "money_sign_mismatch"
    NANOS_OUT_OF_RANGE = "nanos_out_of_range"
    CURRENCY_MISMATCH = "currency_mismatch"

    # Money arithmetic errors
    POSITIVE_OVERFLOW = "positive_overflow"
    NEGATIVE_OVERFLOW = "negative_overflow"
