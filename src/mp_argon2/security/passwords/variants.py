"""Argon2 envelope – variant dispatch and the multi-round stretching loop."""
from __future__ import annotations

import dataclasses
from enum import Enum

from argon2.low_level import ARGON2_VERSION, Type, hash_secret_raw

from mp_argon2.kernel.errors import UnsupportedVariantError
from mp_argon2.security.passwords.codec import b64encode
from mp_argon2.security.passwords.settings import DEFAULT_ROUNDS

__all__ = ["ARGON2_VERSION", "StretchedKDF", "Variant", "resolve"]


class Variant(str, Enum):
    """Supported Argon2 variants, keyed by their record identifier."""

    ARGON2I = "argon2i"
    ARGON2ID = "argon2id"

    @property
    def argon2_type(self) -> Type:
        if self is Variant.ARGON2ID:
            return Type.ID
        return Type.I

    @classmethod
    def parse(cls, name: Variant | str | bytes) -> Variant:
        if isinstance(name, Variant):
            return name
        if isinstance(name, bytes):
            name = name.decode("latin-1")
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedVariantError(name) from None


@dataclasses.dataclass(frozen=True)
class StretchedKDF:
    """Primitive bound to a variant, chained ``rounds`` times.

    The first round hashes the password; every later round hashes the
    previous raw digest with the same salt and costs. The final digest is
    returned text-encoded.
    """

    variant: Variant
    rounds: int = DEFAULT_ROUNDS

    def __call__(
        self,
        password: bytes,
        salt: bytes,
        time_cost: int,
        memory_cost: int,
        parallelism: int,
        tag_len: int,
    ) -> bytes:
        digest = self._derive(password, salt, time_cost, memory_cost, parallelism, tag_len)
        for _ in range(1, self.rounds):
            digest = self._derive(digest, salt, time_cost, memory_cost, parallelism, tag_len)
        return b64encode(digest)

    def _derive(
        self,
        secret: bytes,
        salt: bytes,
        time_cost: int,
        memory_cost: int,
        parallelism: int,
        tag_len: int,
    ) -> bytes:
        return hash_secret_raw(
            secret=secret,
            salt=salt,
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
            hash_len=tag_len,
            type=self.variant.argon2_type,
            version=ARGON2_VERSION,
        )


def resolve(variant: Variant | str | bytes, rounds: int = DEFAULT_ROUNDS) -> StretchedKDF:
    """Return the stretched operation for ``variant``.

    Raises :class:`UnsupportedVariantError` for anything but argon2i / argon2id.
    """
    return StretchedKDF(Variant.parse(variant), rounds)
