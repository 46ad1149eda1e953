"""Kernel security – PasswordHasher port."""
from __future__ import annotations

import abc


class PasswordHasher(abc.ABC):
    """Port: one-way password hashing."""

    @abc.abstractmethod
    def hash(self, password: str) -> str: ...

    @abc.abstractmethod
    def verify(self, password: str, hashed: str) -> bool: ...


__all__ = ["PasswordHasher"]
