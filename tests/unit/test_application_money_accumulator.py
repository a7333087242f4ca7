"""Unit tests for MoneyAccumulator.

Tests cover:
- Folding sequences of amounts into a total
- Empty sequences with and without a currency code
- First invalid amount / currency mismatch reported
- Overflow policy from argument and from Settings
- Structured logging on success, rejection, overflow and clamping

Architecture:
- Unit tests with a mocked LoggerProtocol
- Settings driven through environment variables
"""

import os
from unittest.mock import patch

import pytest

from src.application.services import MoneyAccumulator
from src.core.enums import ErrorCode
from src.core.errors import ArithmeticOverflowError, ValidationError
from src.core.result import Failure, Success
from src.domain.value_objects.money import INT64_MAX, MAX_NANOS, Money
from tests.conftest import create_money


@pytest.mark.unit
class TestMoneyAccumulatorTotal:
    """Test total() results."""

    def test_sums_in_order(self, mock_logger):
        """Test several amounts fold into one total."""
        accumulator = MoneyAccumulator(logger=mock_logger, allow_overflow=False)

        result = accumulator.total(
            [
                create_money(1, 500_000_000),
                create_money(2, 600_000_000),
                create_money(0, -100_000_000),
            ]
        )

        assert isinstance(result, Success)
        assert result.value == create_money(4, 0)

    def test_accepts_any_iterable(self, mock_logger):
        """Test generators are consumed like lists."""
        accumulator = MoneyAccumulator(logger=mock_logger, allow_overflow=False)

        result = accumulator.total(create_money(1, 0) for _ in range(5))

        assert result == Success(value=create_money(5, 0))

    def test_single_value_is_returned(self, mock_logger):
        """Test a one-element sequence totals to that element."""
        amount = create_money(-3, -250_000_000)
        accumulator = MoneyAccumulator(logger=mock_logger, allow_overflow=False)

        assert accumulator.total([amount]) == Success(value=amount)

    def test_empty_sequence_with_currency_is_zero(self, mock_logger):
        """Test an empty fold yields zero in the requested currency."""
        accumulator = MoneyAccumulator(logger=mock_logger, allow_overflow=False)

        result = accumulator.total([], currency_code="EUR")

        assert result == Success(value=Money.zero("EUR"))

    def test_empty_sequence_without_currency_fails(self, mock_logger):
        """Test an empty fold with no currency cannot produce a total."""
        accumulator = MoneyAccumulator(logger=mock_logger, allow_overflow=False)

        result = accumulator.total([])

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_CURRENCY_CODE

    def test_invalid_requested_currency_fails(self, mock_logger):
        """Test the requested currency code is validated."""
        accumulator = MoneyAccumulator(logger=mock_logger, allow_overflow=False)

        result = accumulator.total([create_money(1, 0)], currency_code="DOLLAR")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_CURRENCY_CODE

    def test_first_invalid_amount_is_reported(self, mock_logger):
        """Test validation stops at the first malformed amount."""
        accumulator = MoneyAccumulator(logger=mock_logger, allow_overflow=False)

        result = accumulator.total(
            [
                create_money(1, 0),
                create_money(5, -5),
                create_money(0, 1_000_000_000),
            ]
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.MONEY_SIGN_MISMATCH

    def test_currency_mismatch_with_requested_currency(self, mock_logger):
        """Test every amount must use the requested currency."""
        accumulator = MoneyAccumulator(logger=mock_logger, allow_overflow=False)

        result = accumulator.total([create_money(1, 0, "EUR")], currency_code="USD")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.CURRENCY_MISMATCH

    def test_currency_mismatch_between_amounts(self, mock_logger):
        """Test mixing currencies in the sequence fails."""
        accumulator = MoneyAccumulator(logger=mock_logger, allow_overflow=False)

        result = accumulator.total(
            [create_money(1, 0, "USD"), create_money(1, 0, "GBP")]
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.CURRENCY_MISMATCH


@pytest.mark.unit
class TestMoneyAccumulatorOverflow:
    """Test overflow policy."""

    def test_overflow_fails_when_disallowed(self, mock_logger):
        """Test overflow returns ArithmeticOverflowError."""
        accumulator = MoneyAccumulator(logger=mock_logger, allow_overflow=False)

        result = accumulator.total(
            [create_money(INT64_MAX, MAX_NANOS), create_money(1, 0)]
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ArithmeticOverflowError)
        assert result.error.code == ErrorCode.POSITIVE_OVERFLOW

    def test_overflow_clamps_when_allowed(self, mock_logger):
        """Test overflow clamps and the fold continues."""
        accumulator = MoneyAccumulator(logger=mock_logger, allow_overflow=True)

        result = accumulator.total(
            [
                create_money(INT64_MAX, MAX_NANOS),
                create_money(1, 0),
                create_money(-1, 0),
            ]
        )

        assert result == Success(value=create_money(INT64_MAX - 1, MAX_NANOS))

    def test_policy_defaults_to_settings(self, mock_logger):
        """Test allow_overflow=None reads MONEY_ALLOW_OVERFLOW."""
        with patch.dict(os.environ, {"MONEY_ALLOW_OVERFLOW": "true"}, clear=True):
            accumulator = MoneyAccumulator(logger=mock_logger)

        assert accumulator.allow_overflow is True

    def test_policy_defaults_to_disallowed(self, mock_logger):
        """Test overflow is disallowed when nothing is configured."""
        with patch.dict(os.environ, {}, clear=True):
            accumulator = MoneyAccumulator(logger=mock_logger)

        assert accumulator.allow_overflow is False

    def test_explicit_policy_overrides_settings(self, mock_logger):
        """Test an explicit argument wins over the environment."""
        with patch.dict(os.environ, {"MONEY_ALLOW_OVERFLOW": "true"}, clear=True):
            accumulator = MoneyAccumulator(logger=mock_logger, allow_overflow=False)

        assert accumulator.allow_overflow is False


@pytest.mark.unit
class TestMoneyAccumulatorLogging:
    """Test structured logging."""

    def test_success_logs_debug(self, mock_logger):
        """Test a computed total is logged at debug with its count."""
        accumulator = MoneyAccumulator(logger=mock_logger, allow_overflow=False)

        accumulator.total([create_money(1, 0), create_money(2, 0)])

        mock_logger.debug.assert_called_once_with(
            "Money total computed", currency_code="USD", count=2
        )

    def test_rejection_logs_warning(self, mock_logger):
        """Test an invalid amount is logged at warning with its index."""
        accumulator = MoneyAccumulator(logger=mock_logger, allow_overflow=False)

        accumulator.total([create_money(1, 0), create_money(0, -1_000_000_000)])

        mock_logger.warning.assert_called_once()
        _, kwargs = mock_logger.warning.call_args
        assert kwargs["error_code"] == "nanos_out_of_range"
        assert kwargs["index"] == 1
        mock_logger.debug.assert_not_called()

    def test_overflow_logs_error(self, mock_logger):
        """Test disallowed overflow is logged at error."""
        accumulator = MoneyAccumulator(logger=mock_logger, allow_overflow=False)

        accumulator.total([create_money(INT64_MAX, 0), create_money(1, 0)])

        mock_logger.error.assert_called_once_with(
            "Money total overflowed", error_code="positive_overflow", index=1
        )

    def test_clamp_logs_warning(self, mock_logger):
        """Test a clamped total is logged at warning."""
        accumulator = MoneyAccumulator(logger=mock_logger, allow_overflow=True)

        accumulator.total([create_money(INT64_MAX, 0), create_money(1, 0)])

        mock_logger.warning.assert_called_once_with(
            "Money total clamped after overflow",
            currency_code="USD",
            index=1,
            units=INT64_MAX,
        )
