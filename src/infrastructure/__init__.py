"""Infrastructure layer - Adapters for domain protocols.

Structure:
- logging/: structlog-backed LoggerProtocol implementation

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
