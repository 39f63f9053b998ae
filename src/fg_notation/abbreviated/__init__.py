"""Abbreviated notation: letter mnemonics and dotted modifier prefixes."""

from fg_notation.abbreviated.enums import Modifier, Motion, OtherMotion
from fg_notation.abbreviated.move import Button, Move

__all__ = [
    "Button",
    "Modifier",
    "Motion",
    "Move",
    "OtherMotion",
]
