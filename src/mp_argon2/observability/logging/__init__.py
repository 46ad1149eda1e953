"""Observability – structured logging helpers."""
from mp_argon2.observability.logging.filters import SensitiveFieldsFilter
from mp_argon2.observability.logging.factory import JsonLoggerFactory
from mp_argon2.observability.logging.processors import get_logger

__all__ = [
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
