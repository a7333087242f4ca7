"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import LoggerProtocol
"""

from src.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["LoggerProtocol"]
