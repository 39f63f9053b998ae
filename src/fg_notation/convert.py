"""Conversion between abbreviated and numpad moves.

Buttons carry over unchanged. Motions and modifiers go through fixed
tables; numpad sequences without a named equivalent become
:class:`~fg_notation.abbreviated.OtherMotion`.

Standing and crouching have no numpad prefix. When a whole move is
converted they replace the motion with ``5`` / ``2`` instead; converting the
modifier on its own maps them to :attr:`numpad.Modifier.NONE`.
"""

from __future__ import annotations

import logging

from fg_notation import abbreviated as a
from fg_notation import numpad as n

_LOGGER = logging.getLogger(__name__)

_NUMPAD_BY_MOTION: dict[a.Motion, str] = {
    a.Motion.N: "5",
    a.Motion.U: "8",
    a.Motion.D: "2",
    a.Motion.B: "4",
    a.Motion.F: "6",
    a.Motion.DB: "1",
    a.Motion.DF: "3",
    a.Motion.UB: "7",
    a.Motion.UF: "9",
    a.Motion.QCF: "236",
    a.Motion.QCB: "214",
    a.Motion.HCF: "41236",
    a.Motion.HCB: "63214",
    a.Motion.DP: "623",
    a.Motion.RDP: "421",
    a.Motion.FULL_CIRCLE: "41236987",
    a.Motion.DOUBLE_360: "4123698741236987",
}
_MOTION_BY_NUMPAD: dict[str, a.Motion] = {v: k for k, v in _NUMPAD_BY_MOTION.items()}

_NUMPAD_BY_MODIFIER: dict[a.Modifier, n.Modifier] = {
    a.Modifier.NONE: n.Modifier.NONE,
    a.Modifier.CLOSE: n.Modifier.CLOSE,
    a.Modifier.FAR: n.Modifier.FAR,
    a.Modifier.JUMP: n.Modifier.JUMP,
    a.Modifier.SUPER_JUMP: n.Modifier.SUPER_JUMP,
    a.Modifier.JUMP_CANCEL: n.Modifier.JUMP_CANCEL,
    a.Modifier.TIGER_KNEE: n.Modifier.TIGER_KNEE,
    a.Modifier.STANDING: n.Modifier.NONE,
    a.Modifier.CROUCHING: n.Modifier.NONE,
}
_ABBREVIATED_BY_MODIFIER: dict[n.Modifier, a.Modifier] = {
    n.Modifier.NONE: a.Modifier.NONE,
    n.Modifier.CLOSE: a.Modifier.CLOSE,
    n.Modifier.FAR: a.Modifier.FAR,
    n.Modifier.JUMP: a.Modifier.JUMP,
    n.Modifier.SUPER_JUMP: a.Modifier.SUPER_JUMP,
    n.Modifier.JUMP_CANCEL: a.Modifier.JUMP_CANCEL,
    n.Modifier.TIGER_KNEE: a.Modifier.TIGER_KNEE,
}

# Stance modifiers that override the motion of a converted move.
_STANCE_MOTIONS: dict[a.Modifier, str] = {
    a.Modifier.STANDING: "5",
    a.Modifier.CROUCHING: "2",
}


# ── Abbreviated → numpad ─────────────────────────────────────────────────────


def numpad_button_from_abbreviated(button: a.Button) -> n.Button:
    return n.Button(button.name)


def numpad_motion_from_abbreviated(motion: a.Motion | a.OtherMotion) -> n.Motion:
    """Look up the keypad sequence for *motion*.

    Raises:
        InvalidMotion: an :class:`OtherMotion` whose text is not digits/brackets.
    """
    if isinstance(motion, a.OtherMotion):
        return n.Motion.parse(motion.text)
    return n.Motion(_NUMPAD_BY_MOTION[motion])


def numpad_modifier_from_abbreviated(modifier: a.Modifier) -> n.Modifier:
    return _NUMPAD_BY_MODIFIER[modifier]


def numpad_from_abbreviated(move: a.Move) -> n.Move:
    """Convert a whole move; ``st.``/``cr.`` force the motion to ``5``/``2``."""
    stance = _STANCE_MOTIONS.get(move.modifier)
    if stance is not None:
        _LOGGER.debug("Relocating %s into numpad motion %s", move.modifier.name, stance)
        motion = n.Motion(stance)
    else:
        motion = numpad_motion_from_abbreviated(move.motion)
    return n.Move(
        numpad_modifier_from_abbreviated(move.modifier),
        motion,
        numpad_button_from_abbreviated(move.button),
    )


# ── Numpad → abbreviated ─────────────────────────────────────────────────────


def abbreviated_button_from_numpad(button: n.Button) -> a.Button:
    return a.Button(button.name)


def abbreviated_motion_from_numpad(motion: n.Motion) -> a.Motion | a.OtherMotion:
    """Exact lookup of the digit sequence; unknown sequences stay verbatim.

    Sequences that are already abbreviated text (``360``, ``720``) resolve to
    their named motion rather than ``OtherMotion``, which never holds a name.
    """
    try:
        return _MOTION_BY_NUMPAD[motion.text]
    except KeyError:
        return a.Motion.parse(motion.text)


def abbreviated_modifier_from_numpad(modifier: n.Modifier) -> a.Modifier:
    return _ABBREVIATED_BY_MODIFIER[modifier]


def abbreviated_from_numpad(move: n.Move) -> a.Move:
    return a.Move(
        abbreviated_button_from_numpad(move.button),
        abbreviated_motion_from_numpad(move.motion),
        abbreviated_modifier_from_numpad(move.modifier),
    )
