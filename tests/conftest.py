"""Shared pytest fixtures.

Provides:
1. A mock logger satisfying LoggerProtocol
2. Settings isolation (cached settings cleared around every test)
3. Money factory helper
"""

from unittest.mock import MagicMock

import pytest

from src.core.config import get_settings
from src.core.container import get_logger
from src.domain.value_objects.money import Money


def create_money(units: int = 0, nanos: int = 0, currency_code: str | None = "USD") -> Money:
    """Helper to create Money instances for testing."""
    return Money(currency_code=currency_code, units=units, nanos=nanos)


@pytest.fixture
def mock_logger():
    """Logger double recording every structured call."""
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture(autouse=True)
def _clear_cached_settings():
    """Ensure each test sees settings loaded from its own environment."""
    get_settings.cache_clear()
    get_logger.cache_clear()
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()
