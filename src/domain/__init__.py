"""Domain layer - Pure business logic.

This layer contains the Money value object, its validation and arithmetic,
and the protocols (ports) services depend on. The domain layer has NO
dependencies on any framework or infrastructure - it is pure Python.

Structure:
- value_objects/: Money and its numeric limits
- validators/: check_valid
- services/: add and its carry/sign helpers
- errors/: human-readable error messages
- protocols/: LoggerProtocol
"""
