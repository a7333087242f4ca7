"""Structural validation of Money values.

Money is not validated on construction, so anything received from outside
should pass through check_valid before it is summed.

Usage:
    from src.domain.validators import check_valid

    match check_valid(amount):
        case Success():
            ...
        case Failure(error=error):
            print(error.code, error.field)
"""

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.errors import MoneyError
from src.domain.value_objects.money import CURRENCY_CODE_LENGTH, MAX_NANOS, Money


def check_valid(value: Money) -> Result[Money, ValidationError]:
    """Check that a Money value is well formed.

    Checks are applied in order and the first failure is returned:
    currency code presence and length, then units/nanos sign agreement,
    then the nanos range. The currency code is not looked up in any registry.

    Args:
        value: Money to check.

    Returns:
        Success(Money): The same value, unchanged.
        Failure(ValidationError): INVALID_CURRENCY_CODE, MONEY_SIGN_MISMATCH
            or NANOS_OUT_OF_RANGE.

    Example:
        >>> check_valid(Money("USD", 5, -5))
        Failure(error=ValidationError(code=<ErrorCode.MONEY_SIGN_MISMATCH: ...>, ...))
    """
    currency_code = value.currency_code
    if currency_code is None or len(currency_code) != CURRENCY_CODE_LENGTH:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_CURRENCY_CODE,
                message=MoneyError.INVALID_CURRENCY_CODE,
                field="currency_code",
            )
        )

    units = value.units
    nanos = value.nanos
    if (units > 0 and nanos < 0) or (units < 0 and nanos > 0):
        return Failure(
            error=ValidationError(
                code=ErrorCode.MONEY_SIGN_MISMATCH,
                message=MoneyError.SIGN_MISMATCH,
                field="nanos",
            )
        )

    if abs(nanos) > MAX_NANOS:
        return Failure(
            error=ValidationError(
                code=ErrorCode.NANOS_OUT_OF_RANGE,
                message=MoneyError.NANOS_OUT_OF_RANGE,
                field="nanos",
            )
        )

    return Success(value=value)
