"""Button value object shared by both notations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

from fg_notation.errors import InvalidButton


@dataclass(frozen=True, slots=True)
class BaseButton:
    """One or more button names, kept verbatim (e.g. ``HP``, ``Hp``)."""

    name: str

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, text: str) -> Self:
        """Create a button from *text*; only ASCII letters are accepted."""
        if not text or not all(ch.isascii() and ch.isalpha() for ch in text):
            raise InvalidButton(text)
        return cls(text)
