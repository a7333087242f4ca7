"""Addition of Money values with carry, borrow and overflow handling.

Units behave as signed 64-bit integers and nanos as signed 32-bit integers,
including two's-complement wraparound. Overflow is detected from the wrapped
sums, so the wraparound is emulated explicitly on Python ints.

Inputs are NOT re-validated here. Run check_valid on values received from
outside before adding them.

Usage:
    from src.domain.services import add

    match add(Money("USD", 1, 500_000_000), Money("USD", 2, 600_000_000)):
        case Success(value=total):
            assert total == Money("USD", 4, 100_000_000)
        case Failure(error=error):
            ...
"""

from typing import NamedTuple

from src.core.enums import ErrorCode
from src.core.errors import ArithmeticOverflowError, DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.errors import MoneyError
from src.domain.value_objects.money import (
    BILLION,
    INT64_MAX,
    INT64_MIN,
    MAX_NANOS,
    Money,
)


class NanoSum(NamedTuple):
    """Nanos sum after carry, and the carry to apply to units."""

    sum: int
    carry: int


def _wrap_int64(value: int) -> int:
    return (value + 2**63) % 2**64 - 2**63


def _wrap_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def sum_nanos(a: int, b: int) -> NanoSum:
    """Add two nanos fields, carrying whole units out of the sum.

    Only a magnitude strictly greater than a billion carries. A sum of
    exactly +/-1_000_000_000 is returned as is with no carry.

    Args:
        a: First nanos value.
        b: Second nanos value.

    Returns:
        NanoSum with the remaining nanos and a carry of -1, 0 or 1.
    """
    total = _wrap_int32(a + b)
    if total > BILLION:
        return NanoSum(sum=total - BILLION, carry=1)
    if total < -BILLION:
        return NanoSum(sum=total + BILLION, carry=-1)
    return NanoSum(sum=total, carry=0)


def sign_of(value: Money) -> int:
    """Sign of a Money value: taken from units, or from nanos when units is 0.

    Returns:
        1, -1, or 0 for a zero amount.
    """
    if value.units > 0:
        return 1
    if value.units < 0:
        return -1
    if value.nanos > 0:
        return 1
    if value.nanos < 0:
        return -1
    return 0


def add(
    a: Money, b: Money, allow_overflow: bool = False
) -> Result[Money, DomainError]:
    """Add two Money values of the same currency.

    Nanos are summed first and carried into units, then units and nanos are
    brought to the same sign. Overflow is reported only when both operands
    share a sign and the wrapped units sum crossed to the other side.

    Args:
        a: First amount.
        b: Second amount.
        allow_overflow: Clamp to the largest (or smallest) representable
            amount instead of failing when the sum overflows.

    Returns:
        Success(Money): The sum, in a's currency.
        Failure(ValidationError): CURRENCY_MISMATCH if the codes differ.
        Failure(ArithmeticOverflowError): POSITIVE_OVERFLOW or
            NEGATIVE_OVERFLOW when overflow is not allowed.

    Example:
        >>> add(Money("X", INT64_MAX, 999_999_999), Money("X", 1, 0), True)
        Success(value=Money(currency_code='X', units=9223372036854775807, nanos=999999999))
    """
    if a.currency_code != b.currency_code:
        return Failure(
            error=ValidationError(
                code=ErrorCode.CURRENCY_MISMATCH,
                message=MoneyError.CURRENCY_MISMATCH,
                field="currency_code",
                details={
                    "left": str(a.currency_code),
                    "right": str(b.currency_code),
                },
            )
        )

    nano_sum, carry = sum_nanos(a.nanos, b.nanos)
    unit_sum_no_carry = _wrap_int64(a.units + b.units)
    unit_sum = _wrap_int64(unit_sum_no_carry + carry)

    if unit_sum > 0 and nano_sum < 0:
        unit_sum -= 1
        nano_sum += BILLION
    elif unit_sum < 0 and nano_sum > 0:
        # Not wrapped: a wrapped positive sum must stay negative for the
        # overflow check below.
        unit_sum -= 1
        nano_sum -= BILLION

    sign_a = sign_of(a)
    sign_b = sign_of(b)

    if sign_a > 0 and sign_b > 0 and unit_sum < 0:
        if not allow_overflow:
            return Failure(
                error=ArithmeticOverflowError(
                    code=ErrorCode.POSITIVE_OVERFLOW,
                    message=MoneyError.POSITIVE_OVERFLOW,
                )
            )
        return Success(
            value=Money(
                currency_code=a.currency_code, units=INT64_MAX, nanos=MAX_NANOS
            )
        )

    if sign_a < 0 and sign_b < 0 and (unit_sum_no_carry >= 0 or unit_sum >= 0):
        if not allow_overflow:
            return Failure(
                error=ArithmeticOverflowError(
                    code=ErrorCode.NEGATIVE_OVERFLOW,
                    message=MoneyError.NEGATIVE_OVERFLOW,
                )
            )
        return Success(
            value=Money(
                currency_code=a.currency_code, units=INT64_MIN, nanos=-MAX_NANOS
            )
        )

    return Success(
        value=Money(currency_code=a.currency_code, units=unit_sum, nanos=nano_sum)
    )
