"""Composition root for application-scoped dependencies.

Adapter selection is centralized here so that services depend only on
protocols (LoggerProtocol) and never construct infrastructure themselves.

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    accumulator = MoneyAccumulator(logger=logger)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=settings.use_json_logs,
        level=settings.log_level,
    ).bind(app=settings.app_name, version=settings.app_version)
