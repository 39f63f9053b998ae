"""Abbreviated move value object (``cr.mk``, ``qcf HP``, ``tk.qcf HK``)."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fg_notation.abbreviated.enums import Modifier, Motion, OtherMotion
from fg_notation.button import BaseButton

_LOGGER = logging.getLogger(__name__)


class Button(BaseButton):
    """Button of an abbreviated move."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable abbreviated move: a button plus optional motion and modifier."""

    button: Button
    motion: Motion | OtherMotion = Motion.N
    modifier: Modifier = Modifier.NONE

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{self.modifier}{self.motion}{self.button}"

    @property
    def spaced(self) -> str:
        """Text that parses back to this move: ``qcf HP``, ``cr.mk``.

        A neutral motion is left out and any other motion is separated
        from the button by one space.
        """
        if self.motion.is_neutral:
            return f"{self.modifier}{self.button}"
        return f"{self.modifier}{self.motion} {self.button}"

    # ── Parsing ──────────────────────────────────────────────────────────

    @classmethod
    def parse(cls, text: str) -> Move:
        """Parse abbreviated notation.

        A modifier is only recognised in dotted form, before the first ``.``.
        The remaining text is split on whitespace: with two or more tokens the
        first is the motion, otherwise the motion is neutral. The last token
        is always the button.

        Raises:
            InvalidModifier: the text before ``.`` is not a known prefix.
            InvalidButton: the button token is missing or not alphabetic.
        """
        body = text.strip()
        modifier = Modifier.NONE
        head, dot, rest = body.partition(".")
        if dot:
            modifier = Modifier.parse(head)
            body = rest

        tokens = body.split()
        motion: Motion | OtherMotion = Motion.N
        if len(tokens) >= 2:
            motion = Motion.parse(tokens[0])
        button = Button.parse(tokens[-1] if tokens else "")

        _LOGGER.debug(
            "Parsed abbreviated %r: modifier=%s motion=%s button=%s",
            text,
            modifier.name,
            motion,
            button,
        )
        return cls(button, motion, modifier)
