"""Money domain errors.

Defines the human-readable messages attached to money validation and
arithmetic failures. The machine-readable side lives in ErrorCode.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error) instead)

Usage:
    from src.domain.errors import MoneyError
    from src.core.errors import ValidationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(
        error=ValidationError(
            code=ErrorCode.NANOS_OUT_OF_RANGE,
            message=MoneyError.NANOS_OUT_OF_RANGE,
            field="nanos",
        )
    )
"""


class MoneyError:
    """Money error message constants.

    Error Categories:
        - Validation errors: INVALID_CURRENCY_CODE, SIGN_MISMATCH, NANOS_OUT_OF_RANGE
        - Combination errors: CURRENCY_MISMATCH
        - Arithmetic errors: POSITIVE_OVERFLOW, NEGATIVE_OVERFLOW
    """

    # -------------------------------------------------------------------------
    # Validation Errors
    # -------------------------------------------------------------------------

    INVALID_CURRENCY_CODE = "The currency code is not 3 letters long"
    """Currency code is missing or does not have exactly 3 characters."""

    SIGN_MISMATCH = "The signs of the units and nanos do not match"
    """Units and nanos are both non-zero with opposite signs."""

    NANOS_OUT_OF_RANGE = (
        "The nanos field must be between -999,999,999 and 999,999,999"
    )
    """Absolute value of nanos is a billion or more."""

    # -------------------------------------------------------------------------
    # Combination Errors
    # -------------------------------------------------------------------------

    CURRENCY_MISMATCH = "Money values need the same currency to be summed"
    """Operands of an addition carry different currency codes."""

    # -------------------------------------------------------------------------
    # Arithmetic Errors
    # -------------------------------------------------------------------------

    POSITIVE_OVERFLOW = "Addition failed due to positive overflow"
    """Sum of two positive amounts wrapped past the int64 maximum."""

    NEGATIVE_OVERFLOW = "Addition failed due to negative overflow"
    """Sum of two negative amounts wrapped past the int64 minimum."""
