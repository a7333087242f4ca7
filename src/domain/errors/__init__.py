"""Domain error constants.

Usage:
    from src.domain.errors import MoneyError
"""

from src.domain.errors.money_error import MoneyError

__all__ = ["MoneyError"]
