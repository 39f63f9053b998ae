"""Numpad notation: keypad digits for directions, short letter prefixes."""

from fg_notation.numpad.enums import Modifier
from fg_notation.numpad.move import NEUTRAL, Button, Motion, Move

__all__ = [
    "NEUTRAL",
    "Button",
    "Modifier",
    "Motion",
    "Move",
]
