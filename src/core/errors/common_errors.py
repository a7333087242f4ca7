"""Error classes shared by the money validator and adder.

Error Types:
- ValidationError: The input is malformed or the operands cannot be combined
- ArithmeticOverflowError: The sum leaves the representable range

Keeping the two apart lets callers tell a bad input from an overflowing
total without inspecting messages.

Usage:
    from src.core.errors import ValidationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_CURRENCY_CODE,
        message="The currency code is not 3 letters long",
        field="currency_code",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ArithmeticOverflowError(DomainError):
    """Sum exceeded the int64 units range and overflow was not allowed.

    Attributes:
        code: POSITIVE_OVERFLOW or NEGATIVE_OVERFLOW.
        message: Human-readable message.
        details: Additional context.
    """

    pass
