"""Argon2 envelope – canonical hash record encoding.

Format::

    $<variant>$v=<version>$m=<memory_cost>,t=<time_cost>,p=<parallelism>$<salt>$<digest>

``salt`` and ``digest`` are carried as opaque text tokens.
"""
from __future__ import annotations

import dataclasses
import re

from mp_argon2.kernel.errors import MalformedEncodingError
from mp_argon2.security.passwords.codec import to_bytes

__all__ = ["HashRecord"]

_DELIMITER = b"$"
_SEGMENT_COUNT = 6
_PARAM_COUNT = 3
_DIGITS_RE = re.compile(rb"[0-9]+")


@dataclasses.dataclass(frozen=True)
class HashRecord:
    """One stored password hash."""

    variant: str
    version: int
    memory_cost: int
    time_cost: int
    parallelism: int
    salt: bytes
    digest: bytes

    def encode(self) -> bytes:
        return _DELIMITER.join([
            b"",
            self.variant.encode("latin-1"),
            b"v=%d" % self.version,
            b"m=%d,t=%d,p=%d" % (self.memory_cost, self.time_cost, self.parallelism),
            self.salt,
            self.digest,
        ])

    @classmethod
    def decode(cls, encoded: bytes | str) -> HashRecord:
        """Parse the canonical form; raises :class:`MalformedEncodingError`."""
        _, variant, version, params, salt, digest = _tokenize(to_bytes(encoded))
        memory_cost, time_cost, parallelism = _parse_params(params)
        return cls(
            variant=variant.decode("latin-1"),
            version=_parse_version(version),
            memory_cost=memory_cost,
            time_cost=time_cost,
            parallelism=parallelism,
            salt=salt,
            digest=digest,
        )


def _tokenize(encoded: bytes) -> list[bytes]:
    if not encoded:
        raise MalformedEncodingError("hash is empty")
    if not encoded.startswith(_DELIMITER):
        raise MalformedEncodingError(
            f"hash must start with '$', but started with {encoded[:1].decode('latin-1')!r}"
        )
    segments = encoded.split(_DELIMITER)
    if len(segments) != _SEGMENT_COUNT:
        raise MalformedEncodingError(
            f"expected {_SEGMENT_COUNT} '$'-separated segments, got {len(segments)}"
        )
    return segments


def _parse_uint(raw: bytes, name: str, bits: int) -> int:
    if not _DIGITS_RE.fullmatch(raw):
        raise MalformedEncodingError(f"{name} value {raw!r} is not an unsigned integer")
    digits = raw.lstrip(b"0") or b"0"
    if len(digits) > len(str((1 << bits) - 1)):
        raise MalformedEncodingError(f"{name} value of {len(digits)} digits does not fit in {bits} bits")
    value = int(digits)
    if value >= 1 << bits:
        raise MalformedEncodingError(f"{name} value {value} does not fit in {bits} bits")
    return value


def _parse_version(token: bytes) -> int:
    key, sep, value = token.partition(b"=")
    if key != b"v" or not sep:
        raise MalformedEncodingError(f"version token {token!r} is not of the form v=<integer>")
    return _parse_uint(value, "version", 8)


def _parse_params(token: bytes) -> tuple[int, int, int]:
    pairs = token.split(b",")
    if len(pairs) != _PARAM_COUNT:
        raise MalformedEncodingError(
            f"expected {_PARAM_COUNT} comma-separated parameters, got {len(pairs)}"
        )
    # Unknown keys are skipped; a key that never appears stays 0.
    values = {b"m": 0, b"t": 0, b"p": 0}
    for pair in pairs:
        key, sep, raw = pair.partition(b"=")
        if not sep:
            raise MalformedEncodingError(f"parameter {pair!r} is not of the form key=value")
        value = _parse_uint(raw, key.decode("latin-1"), 8 if key == b"p" else 32)
        if key in values:
            values[key] = value
    return values[b"m"], values[b"t"], values[b"p"]
