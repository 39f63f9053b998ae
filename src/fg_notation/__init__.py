"""Convert between fighting-game move notations.

Supports `numpad <https://glossary.infil.net/?t=Numpad%20Notation>`_ and
`abbreviated <https://glossary.infil.net/?t=Notation>`_ notation, one
sub-package each. Moves and their facets convert through :mod:`fg_notation.convert`.

Quick start::

    from fg_notation import abbreviated, numpad, numpad_from_abbreviated

    move = abbreviated.Move.parse("qcf H")
    assert numpad_from_abbreviated(move) == numpad.Move.parse("236H")
"""

from fg_notation import abbreviated, numpad
from fg_notation.convert import (
    abbreviated_button_from_numpad,
    abbreviated_from_numpad,
    abbreviated_modifier_from_numpad,
    abbreviated_motion_from_numpad,
    numpad_button_from_abbreviated,
    numpad_from_abbreviated,
    numpad_modifier_from_abbreviated,
    numpad_motion_from_abbreviated,
)
from fg_notation.errors import (
    CreationError,
    InvalidButton,
    InvalidModifier,
    InvalidMotion,
)

__version__ = "0.1.0"

__all__ = [
    # Notations
    "abbreviated",
    "numpad",
    # Conversion
    "abbreviated_button_from_numpad",
    "abbreviated_from_numpad",
    "abbreviated_modifier_from_numpad",
    "abbreviated_motion_from_numpad",
    "numpad_button_from_abbreviated",
    "numpad_from_abbreviated",
    "numpad_modifier_from_abbreviated",
    "numpad_motion_from_abbreviated",
    # Errors
    "CreationError",
    "InvalidButton",
    "InvalidModifier",
    "InvalidMotion",
]
