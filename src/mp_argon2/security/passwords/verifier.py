"""Argon2 envelope – verifying a password against a stored record."""
from __future__ import annotations

import dataclasses
import hmac

from argon2.exceptions import HashingError as PrimitiveHashingError
from argon2.low_level import ARGON2_VERSION

from mp_argon2.kernel.errors import HashVersionNotSupportedError, MismatchedHashAndPasswordError
from mp_argon2.observability.logging import get_logger
from mp_argon2.security.passwords.codec import to_bytes
from mp_argon2.security.passwords.record import HashRecord
from mp_argon2.security.passwords.settings import DEFAULT_SETTINGS, Argon2Settings
from mp_argon2.security.passwords.variants import resolve

__all__ = ["compare"]

_log = get_logger(__name__)


def compare(
    hashed: bytes | str,
    password: bytes | str,
    settings: Argon2Settings | None = None,
) -> None:
    """Return ``None`` if ``password`` matches ``hashed``; raise otherwise.

    Costs, variant and salt come from the record; the round count and digest
    length come from ``settings`` since the record does not carry them.

    Raises:
        MalformedEncodingError: ``hashed`` is not a canonical record.
        UnsupportedVariantError: the record names an unknown variant.
        HashVersionNotSupportedError: the record's version is not 19.
        MismatchedHashAndPasswordError: the password does not match.
    """
    settings = settings or DEFAULT_SETTINGS
    stored = HashRecord.decode(hashed)
    kdf = resolve(stored.variant, settings.rounds)
    if stored.version != ARGON2_VERSION:
        _log.info("argon2.compare.version_rejected", version=stored.version)
        raise HashVersionNotSupportedError(stored.version, ARGON2_VERSION)

    _log.debug(
        "argon2.compare",
        variant=stored.variant,
        memory_cost=stored.memory_cost,
        time_cost=stored.time_cost,
        parallelism=stored.parallelism,
        rounds=kdf.rounds,
    )
    try:
        digest = kdf(
            to_bytes(password),
            stored.salt,
            stored.time_cost,
            stored.memory_cost,
            stored.parallelism,
            settings.tag_len,
        )
    except PrimitiveHashingError as exc:
        raise MismatchedHashAndPasswordError(cause=exc) from exc

    candidate = dataclasses.replace(stored, digest=digest)
    if not hmac.compare_digest(stored.encode(), candidate.encode()):
        _log.info("argon2.compare.mismatch", variant=stored.variant)
        raise MismatchedHashAndPasswordError()
