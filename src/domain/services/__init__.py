"""Domain services: pure operations over value objects."""

from src.domain.services.money_arithmetic import NanoSum, add, sign_of, sum_nanos

__all__ = ["NanoSum", "add", "sign_of", "sum_nanos"]
