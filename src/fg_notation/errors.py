"""Errors raised while building moves from text."""

from __future__ import annotations


class CreationError(ValueError):
    """Base class for every notation parse failure.

    Args:
        text: The offending input fragment.
    """

    label = "Invalid input"

    def __init__(self, text: str) -> None:
        super().__init__(f"{self.label}: {text!r}")
        self.text = text


class InvalidMotion(CreationError):
    """Motion text contains a character the notation does not allow."""

    label = "Invalid motion input"


class InvalidButton(CreationError):
    """Button text is empty or contains a non-alphabetic character."""

    label = "Invalid button"


class InvalidModifier(CreationError):
    """Modifier prefix is not part of the notation's vocabulary."""

    label = "Invalid modifier"
