"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass(frozen=True)
class Settings:
    """Base class for immutable 12-factor settings.

    Instances are built once and passed explicitly to the code that needs
    them; there is no process-wide mutable registry.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


__all__ = ["Settings"]
