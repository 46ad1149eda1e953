"""Kernel security – PasswordHasher port, sensitive field names."""
from mp_argon2.kernel.security.crypto import PasswordHasher
from mp_argon2.kernel.security.pii import DEFAULT_SENSITIVE_FIELDS

__all__ = ["DEFAULT_SENSITIVE_FIELDS", "PasswordHasher"]
