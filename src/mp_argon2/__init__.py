"""
mp_argon2 – Argon2 password hashing envelope.

Import path convention::

    from mp_argon2.security.passwords import generate, compare, Argon2Settings
    from mp_argon2.kernel.errors import MismatchedHashAndPasswordError
    from mp_argon2.config.settings import EnvSettingsLoader
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
