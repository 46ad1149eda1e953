"""Kernel – framework-agnostic building blocks."""

from mp_argon2.kernel.errors import (
    BaseError,
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
