"""Closed vocabularies of numpad notation."""

from __future__ import annotations

from enum import StrEnum

from fg_notation.errors import InvalidModifier


class Modifier(StrEnum):
    """Numpad prefixes, valued by their dotted spelling.

    There is no standing/crouching prefix: those are expressed by the
    motion (``5`` and ``2``).
    """

    NONE = ""
    JUMP = "j."
    SUPER_JUMP = "sj."
    JUMP_CANCEL = "jc."
    CLOSE = "c."
    FAR = "f."
    TIGER_KNEE = "tk."

    @classmethod
    def parse(cls, text: str) -> Modifier:
        """Exact match against the dotted or undotted prefix (``c.`` / ``c``)."""
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

# Prefixes accepted without a dot, longest first so ``jc`` never splits as ``j``.
BARE_PREFIXES: tuple[tuple[str, Modifier], ...] = (
    ("jc", Modifier.JUMP_CANCEL),
    ("tk", Modifier.TIGER_KNEE),
    ("j", Modifier.JUMP),
    ("c", Modifier.CLOSE),
)
