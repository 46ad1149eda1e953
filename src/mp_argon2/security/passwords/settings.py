"""Argon2 envelope – default tunables and the immutable settings value."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_argon2.config.settings import Settings
from mp_argon2.config.validation import InvalidSettingValueError

__all__ = [
    "DEFAULT_MEMORY_COST",
    "DEFAULT_PARALLELISM",
    "DEFAULT_ROUNDS",
    "DEFAULT_SALT_LEN",
    "DEFAULT_SETTINGS",
    "DEFAULT_TAG_LEN",
    "DEFAULT_TIME_COST",
    "Argon2Settings",
]

DEFAULT_ROUNDS = 10  # See https://eprint.iacr.org/2016/759.pdf
DEFAULT_TIME_COST = 3
DEFAULT_MEMORY_COST = 32 * 1024
DEFAULT_PARALLELISM = 2
DEFAULT_TAG_LEN = 32
DEFAULT_SALT_LEN = 16

_UINT8_MAX = (1 << 8) - 1
_UINT32_MAX = (1 << 32) - 1


@dataclasses.dataclass(frozen=True)
class Argon2Settings(Settings):
    """Cost parameters used when creating and re-deriving hashes.

    ``rounds`` is the number of chained primitive invocations and is not
    recorded in the encoded hash, so verification must use the same value
    that was used at creation time. ``memory_cost`` is in KiB.
    """

    _prefix: ClassVar[str] = "ARGON2"

    rounds: int = DEFAULT_ROUNDS
    time_cost: int = DEFAULT_TIME_COST
    memory_cost: int = DEFAULT_MEMORY_COST
    parallelism: int = DEFAULT_PARALLELISM
    tag_len: int = DEFAULT_TAG_LEN
    salt_len: int = DEFAULT_SALT_LEN

    def _validate(self) -> None:
        # Lower bounds are the primitive's hard minima, not recommendations.
        # An encoded salt shorter than 8 bytes is rejected by the primitive.
        limits = {
            "rounds": (1, None),
            "time_cost": (1, _UINT32_MAX),
            "memory_cost": (8, _UINT32_MAX),
            "parallelism": (1, _UINT8_MAX),
            "tag_len": (4, _UINT32_MAX),
            "salt_len": (6, None),
        }
        for name, (low, high) in limits.items():
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidSettingValueError(name, value, "must be an integer")
            if value < low:
                raise InvalidSettingValueError(name, value, f"must be >= {low}")
            if high is not None and value > high:
                raise InvalidSettingValueError(name, value, f"must be <= {high}")
        if self.memory_cost < 8 * self.parallelism:
            raise InvalidSettingValueError(
                "memory_cost", self.memory_cost, f"must be >= 8 * parallelism ({8 * self.parallelism})"
            )


DEFAULT_SETTINGS = Argon2Settings()
