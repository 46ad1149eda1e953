"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── HashingError                     (hashing.py)
        ├── UnsupportedVariantError
        ├── MalformedEncodingError
        ├── HashVersionNotSupportedError
        ├── RNGFailureError
        └── MismatchedHashAndPasswordError
"""

from mp_argon2.kernel.errors.base import BaseError
from mp_argon2.kernel.errors.hashing import (
    HashErrorKind,
    HashingError,
    HashVersionNotSupportedError,
    MalformedEncodingError,
    MismatchedHashAndPasswordError,
    RNGFailureError,
    UnsupportedVariantError,
)

__all__ = [
    "BaseError",
    "HashErrorKind",
    "HashVersionNotSupportedError",
    "HashingError",
    "MalformedEncodingError",
    "MismatchedHashAndPasswordError",
    "RNGFailureError",
    "UnsupportedVariantError",
]
