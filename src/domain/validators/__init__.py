"""Validators package exports."""

from src.domain.validators.money_validator import check_valid

__all__ = ["check_valid"]
