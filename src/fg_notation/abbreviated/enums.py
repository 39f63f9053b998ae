"""Closed vocabularies of abbreviated notation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from fg_notation.errors import InvalidModifier


class Motion(StrEnum):
    """Named directions and special inputs, valued by their canonical text."""

    N = "n"
    U = "u"
    D = "d"
    B = "b"
    F = "f"
    UB = "ub"
    UF = "uf"
    DB = "db"
    DF = "df"
    QCF = "qcf"
    QCB = "qcb"
    HCF = "hcf"
    HCB = "hcb"
    DP = "dp"
    RDP = "rdp"
    FULL_CIRCLE = "360"
    DOUBLE_360 = "720"

    @property
    def is_neutral(self) -> bool:
        return self is Motion.N

    @classmethod
    def parse(cls, text: str) -> Motion | OtherMotion:
        """Match *text* case-insensitively; anything unknown becomes :class:`OtherMotion`.

        Empty text is the neutral motion. ``dp``/``rdp`` have no text form and
        are only produced by converting numpad ``623``/``421``.
        """
        key = text.lower()
        if not key:
            return cls.N
        try:
            return _MOTION_BY_TEXT[key]
        except KeyError:
            return OtherMotion(key)


# DP/RDP are deliberately absent.
_MOTION_BY_TEXT: dict[str, Motion] = {
    "n": Motion.N,
    "u": Motion.U,
    "d": Motion.D,
    "b": Motion.B,
    "f": Motion.F,
    "ub": Motion.UB,
    "u/b": Motion.UB,
    "uf": Motion.UF,
    "u/f": Motion.UF,
    "db": Motion.DB,
    "d/b": Motion.DB,
    "df": Motion.DF,
    "d/f": Motion.DF,
    "qcf": Motion.QCF,
    "qcb": Motion.QCB,
    "hcf": Motion.HCF,
    "hcb": Motion.HCB,
    "360": Motion.FULL_CIRCLE,
    "720": Motion.DOUBLE_360,
}


@dataclass(frozen=True, slots=True)
class OtherMotion:
    """Motion text with no named equivalent, stored lowercased."""

    text: str

    def __post_init__(self) -> None:
        if not self.text or self.text.lower() in _MOTION_BY_TEXT:
            raise ValueError(f"{self.text!r} names a known motion")
        object.__setattr__(self, "text", self.text.lower())

    def __str__(self) -> str:
        return self.text

    @property
    def is_neutral(self) -> bool:
        return False


class Modifier(StrEnum):
    """Positional/timing prefixes, valued by their dotted spelling."""

    NONE = ""
    CLOSE = "cl."
    FAR = "f."
    STANDING = "st."
    CROUCHING = "cr."
    JUMP = "j."
    SUPER_JUMP = "sj."
    JUMP_CANCEL = "jc."
    TIGER_KNEE = "tk."

    @classmethod
    def parse(cls, text: str) -> Modifier:
        """Exact match against the dotted or undotted prefix (``cr.`` / ``cr``)."""
        try:
            return _MODIFIER_BY_TEXT[text]
        except KeyError:
            raise InvalidModifier(text) from None


_MODIFIER_BY_TEXT: dict[str, Modifier] = {}
for _modifier in Modifier:
    if _modifier is not Modifier.NONE:
        _MODIFIER_BY_TEXT[_modifier.value] = _modifier
        _MODIFIER_BY_TEXT[_modifier.value.rstrip(".")] = _modifier
del _modifier
