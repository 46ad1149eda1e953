"""Argon2 envelope – creating new hash records."""
from __future__ import annotations

from argon2.low_level import ARGON2_VERSION

from mp_argon2.observability.logging import get_logger
from mp_argon2.security.passwords.codec import b64encode, to_bytes
from mp_argon2.security.passwords.record import HashRecord
from mp_argon2.security.passwords.salt import DEFAULT_SALT_SOURCE, SaltSource, read_salt
from mp_argon2.security.passwords.settings import DEFAULT_SETTINGS, Argon2Settings
from mp_argon2.security.passwords.variants import Variant, resolve

__all__ = ["generate"]

_log = get_logger(__name__)


def generate(
    variant: Variant | str,
    password: bytes | str,
    settings: Argon2Settings | None = None,
    *,
    salt_source: SaltSource | None = None,
) -> bytes:
    """Hash ``password`` and return the encoded record.

    The primitive is salted with the *encoded* salt token, not the raw
    random bytes, so that records stay compatible with existing stores.

    Raises:
        RNGFailureError: the salt source failed.
        UnsupportedVariantError: ``variant`` is not argon2i / argon2id.
    """
    settings = settings or DEFAULT_SETTINGS
    salt = b64encode(read_salt(salt_source or DEFAULT_SALT_SOURCE, settings.salt_len))
    kdf = resolve(variant, settings.rounds)

    digest = kdf(
        to_bytes(password),
        salt,
        settings.time_cost,
        settings.memory_cost,
        settings.parallelism,
        settings.tag_len,
    )
    record = HashRecord(
        variant=kdf.variant.value,
        version=ARGON2_VERSION,
        memory_cost=settings.memory_cost,
        time_cost=settings.time_cost,
        parallelism=settings.parallelism,
        salt=salt,
        digest=digest,
    )
    _log.debug(
        "argon2.generate",
        variant=record.variant,
        memory_cost=record.memory_cost,
        time_cost=record.time_cost,
        parallelism=record.parallelism,
        rounds=kdf.rounds,
    )
    return record.encode()
