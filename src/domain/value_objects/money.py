"""Immutable Money value object with fixed-point units and nanos.

Quota costs are accumulated as exact integers: a whole-unit part (int64) and
a fractional part in billionths of a unit (int32). Floats never enter the
arithmetic, so no precision is lost however many amounts are summed.

Money does NOT validate itself on construction. Values arrive from callers
(metering, billing) and are checked on demand with
src.domain.validators.money_validator.check_valid.

Usage:
    from src.domain.value_objects import Money

    fee = Money(currency_code="USD", units=1, nanos=500_000_000)  # 1.50 USD
    refund = Money(currency_code="USD", units=-2, nanos=-250_000_000)  # -2.25 USD
"""

from dataclasses import dataclass
from typing import Self

BILLION = 1_000_000_000
MAX_NANOS = BILLION - 1

INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)
INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)

CURRENCY_CODE_LENGTH = 3


@dataclass(frozen=True, slots=True)
class Money:
    """Amount of money in a single currency.

    Attributes:
        currency_code: 3-letter currency code (e.g. "USD"). Only presence and
            length are ever checked, never membership in ISO 4217.
        units: Whole units of the amount, signed 64-bit.
        nanos: Billionths of a unit, signed 32-bit. For a valid value it lies
            in [-999_999_999, 999_999_999] and carries the same sign as units
            whenever both are non-zero.

    Example:
        >>> Money("USD", 4, 100_000_000)
        Money(currency_code='USD', units=4, nanos=100000000)
    """

    currency_code: str | None
    units: int = 0
    nanos: int = 0

    @classmethod
    def zero(cls, currency_code: str) -> Self:
        """Create a zero amount in the given currency.

        Args:
            currency_code: Currency code for the amount.

        Returns:
            Money with units and nanos both zero.
        """
        return cls(currency_code=currency_code, units=0, nanos=0)

    def is_zero(self) -> bool:
        """Check if both units and nanos are zero."""
        return self.units == 0 and self.nanos == 0
