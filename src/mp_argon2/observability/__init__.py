"""Observability – structured logging."""
from mp_argon2.observability.logging import JsonLoggerFactory, SensitiveFieldsFilter, get_logger

__all__ = ["JsonLoggerFactory", "SensitiveFieldsFilter", "get_logger"]
