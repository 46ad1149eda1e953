"""Security – Argon2 password hashing envelope."""
from mp_argon2.security.passwords.hasher import generate
from mp_argon2.security.passwords.password_hasher import Argon2PasswordHasher
from mp_argon2.security.passwords.record import HashRecord
from mp_argon2.security.passwords.salt import DEFAULT_SALT_SOURCE, SaltSource, SystemSaltSource
from mp_argon2.security.passwords.settings import DEFAULT_SETTINGS, Argon2Settings
from mp_argon2.security.passwords.variants import ARGON2_VERSION, StretchedKDF, Variant, resolve
from mp_argon2.security.passwords.verifier import compare

# bcrypt-style names
generate_from_password = generate
compare_hash_and_password = compare

__all__ = [
    "ARGON2_VERSION",
    "DEFAULT_SALT_SOURCE",
    "DEFAULT_SETTINGS",
    "Argon2PasswordHasher",
    "Argon2Settings",
    "HashRecord",
    "SaltSource",
    "StretchedKDF",
    "SystemSaltSource",
    "Variant",
    "compare",
    "compare_hash_and_password",
    "generate",
    "generate_from_password",
    "resolve",
]
