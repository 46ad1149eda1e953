"""Argon2 envelope – secure random salt source."""
from __future__ import annotations

import os
import threading
from typing import Callable, Protocol

from mp_argon2.kernel.errors import RNGFailureError

__all__ = ["DEFAULT_SALT_SOURCE", "SaltSource", "SystemSaltSource", "read_salt"]


class SaltSource(Protocol):
    """Cryptographically secure byte source."""

    def read(self, size: int) -> bytes: ...


class SystemSaltSource:
    """OS CSPRNG; reads are serialised so a non-reentrant source is safe to share."""

    def __init__(self, randbytes: Callable[[int], bytes] = os.urandom) -> None:
        self._randbytes = randbytes
        self._lock = threading.Lock()

    def read(self, size: int) -> bytes:
        with self._lock:
            return self._randbytes(size)


DEFAULT_SALT_SOURCE = SystemSaltSource()


def read_salt(source: SaltSource, size: int) -> bytes:
    """Draw exactly ``size`` raw bytes or raise :class:`RNGFailureError`."""
    try:
        raw = source.read(size)
    except (OSError, NotImplementedError) as exc:
        raise RNGFailureError(cause=exc) from exc
    if len(raw) != size:
        raise RNGFailureError(f"secure random source returned {len(raw)} of {size} bytes")
    return raw
