"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes for money validation and arithmetic failures
- Settings and the logger composition root

The core module has NO dependencies on other application layers.
"""

from src.core.enums import ErrorCode
from src.core.errors import ArithmeticOverflowError, DomainError, ValidationError
from src.core.result import Failure, Result, Success

__all__ = [
    "ArithmeticOverflowError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
    "ValidationError",
]
