"""Security – password hashing."""
from mp_argon2.security.passwords import (
    ARGON2_VERSION,
    Argon2PasswordHasher,
    Argon2Settings,
    HashRecord,
    Variant,
    compare,
    compare_hash_and_password,
    generate,
    generate_from_password,
)

__all__ = [
    "ARGON2_VERSION",
    "Argon2PasswordHasher",
    "Argon2Settings",
    "HashRecord",
    "Variant",
    "compare",
    "compare_hash_and_password",
    "generate",
    "generate_from_password",
]
