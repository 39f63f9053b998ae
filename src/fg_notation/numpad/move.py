"""Numpad move value object (``2MK``, ``j.236H``, ``[4]6A``)."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fg_notation.button import BaseButton
from fg_notation.errors import InvalidMotion
from fg_notation.numpad.enums import BARE_PREFIXES, Modifier

_LOGGER = logging.getLogger(__name__)

MOTION_CHARS = frozenset("0123456789[]")
NEUTRAL = "5"


class Button(BaseButton):
    """Button of a numpad move."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class Motion:
    """Keypad digits, with ``[...]`` marking a held (charge) partition.

    Bracket balance is not checked: ``]4[`` is accepted as-is.
    """

    text: str = NEUTRAL

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)

    @property
    def is_neutral(self) -> bool:
        return self.text == NEUTRAL

    @classmethod
    def parse(cls, text: str) -> Motion:
        """Create a motion from digits and brackets; empty text means ``5``."""
        if not text:
            return cls(NEUTRAL)
        if not all(ch in MOTION_CHARS for ch in text):
            raise InvalidMotion(text)
        return cls(text)


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable numpad move."""

    modifier: Modifier
    motion: Motion
    button: Button

    def __str__(self) -> str:
        return f"{self.modifier}{self.motion}{self.button}"

    @classmethod
    def parse(cls, text: str) -> Move:
        """Parse numpad notation.

        The modifier is the text before the first ``.``; without a dot the
        bare prefixes ``jc``, ``tk``, ``j`` and ``c`` are tried. The longest
        leading run of digits/brackets is the motion and the rest the button.

        Raises:
            InvalidModifier: the text before ``.`` is not a known prefix.
            InvalidButton: the button part is missing or not alphabetic.
        """
        body = text.strip()
        head, dot, rest = body.partition(".")
        if dot:
            modifier = Modifier.parse(head)
            body = rest
        else:
            modifier, body = _split_bare_prefix(body)

        end = 0
        while end < len(body) and body[end] in MOTION_CHARS:
            end += 1
        motion = Motion.parse(body[:end])
        button = Button.parse(body[end:])

        _LOGGER.debug(
            "Parsed numpad %r: modifier=%s motion=%s button=%s",
            text,
            modifier.name,
            motion,
            button,
        )
        return cls(modifier, motion, button)


def _split_bare_prefix(body: str) -> tuple[Modifier, str]:
    for prefix, modifier in BARE_PREFIXES:
        if body.startswith(prefix) and len(body) > len(prefix):
            return modifier, body[len(prefix) :]
    return Modifier.NONE, body
