"""Password hashing errors — one class per closed :class:`HashErrorKind`."""

from __future__ import annotations

from enum import Enum
from typing import Any

from mp_argon2.kernel.errors.base import BaseError


class HashErrorKind(str, Enum):
    """Every way a generate / compare call can fail."""

    UNSUPPORTED_VARIANT = "unsupported_variant"
    MALFORMED_ENCODING = "malformed_encoding"
    HASH_VERSION_NOT_SUPPORTED = "hash_version_not_supported"
    RNG_FAILURE = "rng_failure"
    MISMATCHED_HASH_AND_PASSWORD = "mismatched_hash_and_password"


class HashingError(BaseError):
    """Base class for envelope failures; ``kind`` tells them apart."""

    kind: HashErrorKind
    default_code = "hashing_error"


class UnsupportedVariantError(HashingError):
    """Requested or decoded variant is not argon2i / argon2id."""

    kind = HashErrorKind.UNSUPPORTED_VARIANT
    default_code = kind.value

    def __init__(self, variant: str | bytes, **kwargs: Any) -> None:
        if isinstance(variant, bytes):
            variant = variant.decode("utf-8", errors="replace")
        super().__init__(
            f"argon2 algorithm variant '{variant}' is not supported",
            detail={"variant": variant},
            **kwargs,
        )
        self.variant = variant


class MalformedEncodingError(HashingError):
    """Encoded hash record could not be parsed."""

    kind = HashErrorKind.MALFORMED_ENCODING
    default_code = kind.value

    def __init__(self, reason: str, **kwargs: Any) -> None:
        super().__init__(f"malformed argon2 hash: {reason}", detail={"reason": reason}, **kwargs)
        self.reason = reason


class HashVersionNotSupportedError(HashingError):
    """Record was produced by a different version of the primitive."""

    kind = HashErrorKind.HASH_VERSION_NOT_SUPPORTED
    default_code = kind.value

    def __init__(self, version: int, supported: int, **kwargs: Any) -> None:
        super().__init__(
            f"argon2 algorithm version '{version}' requested is not equal "
            f"to the current version '{supported}'",
            detail={"version": version, "supported": supported},
            **kwargs,
        )
        self.version = version
        self.supported = supported


class RNGFailureError(HashingError):
    """The secure random source could not supply a salt."""

    kind = HashErrorKind.RNG_FAILURE
    default_code = kind.value

    def __init__(self, message: str = "secure random source failed to produce a salt", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class MismatchedHashAndPasswordError(HashingError):
    """Password does not produce the stored hash."""

    kind = HashErrorKind.MISMATCHED_HASH_AND_PASSWORD
    default_code = kind.value

    def __init__(
        self,
        message: str = "hashed password is not the hash of the given password",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)


__all__ = [
    "HashErrorKind",
    "HashVersionNotSupportedError",
    "HashingError",
    "MalformedEncodingError",
    "MismatchedHashAndPasswordError",
    "RNGFailureError",
    "UnsupportedVariantError",
]
