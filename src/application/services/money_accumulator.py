"""Money accumulation service.

Folds a sequence of Money values into one total, the way the usage/billing
pipeline sums quota costs: every amount is validated, then added to the
running total with the configured overflow policy.

Architecture:
    - Application service (orchestrates domain validator and adder)
    - Depends on LoggerProtocol only; adapter chosen by the container
    - Returns Result types; never raises for bad amounts

Usage:
    from src.application.services import MoneyAccumulator
    from src.core.container import get_logger

    accumulator = MoneyAccumulator(logger=get_logger())
    result = accumulator.total(costs, currency_code="USD")
"""

from collections.abc import Iterable

from src.core.config import get_settings
from src.core.enums import ErrorCode
from src.core.errors import ArithmeticOverflowError, DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.errors import MoneyError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.services.money_arithmetic import add
from src.domain.validators.money_validator import check_valid
from src.domain.value_objects.money import (
    INT64_MAX,
    INT64_MIN,
    MAX_NANOS,
    Money,
)


class MoneyAccumulator:
    """Sums many Money values of one currency.

    Dependencies (injected via constructor):
        - LoggerProtocol: For structured logging

    Example:
        >>> accumulator = MoneyAccumulator(logger=logger, allow_overflow=True)
        >>> result = accumulator.total([fee, fee, refund])
        >>> if isinstance(result, Success):
        ...     print(result.value)
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        allow_overflow: bool | None = None,
    ) -> None:
        """Initialize accumulator with dependencies.

        Args:
            logger: Logger for structured logging.
            allow_overflow: Clamp overflowing totals instead of failing.
                Defaults to Settings.money_allow_overflow when None.
        """
        self._logger = logger
        if allow_overflow is None:
            allow_overflow = get_settings().money_allow_overflow
        self._allow_overflow = allow_overflow

    @property
    def allow_overflow(self) -> bool:
        """Overflow policy applied to every addition."""
        return self._allow_overflow

    def total(
        self,
        values: Iterable[Money],
        *,
        currency_code: str | None = None,
    ) -> Result[Money, DomainError]:
        """Validate and sum amounts in order.

        Args:
            values: Amounts to sum.
            currency_code: Expected currency. Required to produce a zero total
                from an empty sequence; when given, every amount must use it.

        Returns:
            Success(Money): The total.
            Failure(ValidationError): First invalid amount, a currency
                mismatch, or an empty sequence without a currency code.
            Failure(ArithmeticOverflowError): The total overflowed and
                overflow is not allowed.
        """
        running: Money | None = None
        if currency_code is not None:
            seed = Money.zero(currency_code)
            checked = check_valid(seed)
            if isinstance(checked, Failure):
                return self._reject(checked.error, index=None)
            running = seed

        count = 0
        for index, value in enumerate(values):
            checked = check_valid(value)
            if isinstance(checked, Failure):
                return self._reject(checked.error, index=index)

            if running is None:
                running = value
            else:
                result = add(running, value, self._allow_overflow)
                if isinstance(result, Failure):
                    return self._reject(result.error, index=index)
                running = result.value
                if self._allow_overflow and self._is_clamped(running):
                    self._logger.warning(
                        "Money total clamped after overflow",
                        currency_code=running.currency_code,
                        index=index,
                        units=running.units,
                    )
            count += 1

        if running is None:
            error = ValidationError(
                code=ErrorCode.INVALID_CURRENCY_CODE,
                message=MoneyError.INVALID_CURRENCY_CODE,
                field="currency_code",
                details={"reason": "empty sequence without currency code"},
            )
            return self._reject(error, index=None)

        self._logger.debug(
            "Money total computed",
            currency_code=running.currency_code,
            count=count,
        )
        return Success(value=running)

    def _reject(
        self, error: DomainError, *, index: int | None
    ) -> Failure[DomainError]:
        if isinstance(error, ArithmeticOverflowError):
            self._logger.error(
                "Money total overflowed",
                error_code=error.code.value,
                index=index,
            )
        else:
            self._logger.warning(
                "Money total rejected",
                error_code=error.code.value,
                reason=error.message,
                index=index,
            )
        return Failure(error=error)

    @staticmethod
    def _is_clamped(value: Money) -> bool:
        return (value.units, value.nanos) in (
            (INT64_MAX, MAX_NANOS),
            (INT64_MIN, -MAX_NANOS),
        )
