"""Core errors package.

Usage:
    from src.core.errors import ArithmeticOverflowError, DomainError, ValidationError
"""

from src.core.errors.common_errors import ArithmeticOverflowError, ValidationError
from src.core.errors.domain_error import DomainError

__all__ = [
    "ArithmeticOverflowError",
    "DomainError",
    "ValidationError",
]
