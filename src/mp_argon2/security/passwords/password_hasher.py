"""Argon2 envelope – adapter for the kernel :class:`PasswordHasher` port."""
from __future__ import annotations

from mp_argon2.kernel.errors import MismatchedHashAndPasswordError
from mp_argon2.kernel.security import PasswordHasher
from mp_argon2.security.passwords.hasher import generate
from mp_argon2.security.passwords.salt import SaltSource
from mp_argon2.security.passwords.settings import DEFAULT_SETTINGS, Argon2Settings
from mp_argon2.security.passwords.variants import Variant
from mp_argon2.security.passwords.verifier import compare

__all__ = ["Argon2PasswordHasher"]


class Argon2PasswordHasher(PasswordHasher):
    """Text-in, text-out password hasher.

    ``verify`` returns ``False`` only for a wrong password; malformed,
    unsupported or version-mismatched hashes still raise.
    """

    def __init__(
        self,
        settings: Argon2Settings | None = None,
        variant: Variant | str = Variant.ARGON2ID,
        *,
        salt_source: SaltSource | None = None,
    ) -> None:
        self._settings = settings or DEFAULT_SETTINGS
        self._variant = Variant.parse(variant)
        self._salt_source = salt_source

    @property
    def settings(self) -> Argon2Settings:
        return self._settings

    @property
    def variant(self) -> Variant:
        return self._variant

    def hash(self, password: str) -> str:
        encoded = generate(self._variant, password, self._settings, salt_source=self._salt_source)
        return encoded.decode("ascii")

    def verify(self, password: str, hashed: str) -> bool:
        try:
            compare(hashed, password, self._settings)
        except MismatchedHashAndPasswordError:
            return False
        return True
