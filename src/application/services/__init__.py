"""Application services."""

from src.application.services.money_accumulator import MoneyAccumulator

__all__ = ["MoneyAccumulator"]
