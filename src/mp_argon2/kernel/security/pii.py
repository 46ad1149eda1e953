"""Kernel security – default sensitive field names."""
from __future__ import annotations

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "secret", "token", "salt", "digest",
    "hashed", "hashed_password", "authorization",
})

__all__ = ["DEFAULT_SENSITIVE_FIELDS"]
