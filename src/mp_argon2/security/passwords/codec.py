"""Argon2 envelope – text codec for salts and digests.

Bytes are rendered with the bcrypt base64 alphabet (``./A-Za-z0-9``) and
without ``=`` padding. Encoded tokens are never decoded back.
"""
from __future__ import annotations

import base64

__all__ = ["b64encode", "to_bytes"]

_STD_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_BCRYPT_ALPHABET = b"./ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
_TO_BCRYPT = bytes.maketrans(_STD_ALPHABET, _BCRYPT_ALPHABET)


def b64encode(data: bytes) -> bytes:
    return base64.b64encode(data).translate(_TO_BCRYPT).rstrip(b"=")


def to_bytes(value: bytes | bytearray | memoryview | str) -> bytes:
    """Passwords and hashes may be given as text; text is UTF-8 encoded."""
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"expected bytes or str, got {type(value).__name__}")
