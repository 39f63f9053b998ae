"""Tests for numpad notation parsing and rendering."""

import pytest

from fg_notation.errors import InvalidButton, InvalidModifier, InvalidMotion
from fg_notation.numpad import Button, Modifier, Motion, Move


class TestMotion:
    @pytest.mark.parametrize("text", ["5", "2", "236", "41236987", "[4]6", "[2]8"])
    def test_roundtrip(self, text: str) -> None:
        assert str(Motion.parse(text)) == text

    def test_empty_is_neutral(self) -> None:
        motion = Motion.parse("")
        assert str(motion) == "5"
        assert motion.is_neutral

    def test_length(self) -> None:
        assert len(Motion.parse("236")) == 3
        assert len(Motion.parse("[4]6")) == 4

    def test_not_neutral(self) -> None:
        assert not Motion.parse("55").is_neutral

    def test_unbalanced_brackets_accepted(self) -> None:
        # Bracket placement is not validated.
        assert Motion.parse("]4[") == Motion("]4[")
        assert Motion.parse("][4") == Motion("][4")

    @pytest.mark.parametrize("text", ["balls22", "qcf", "2 3", "２"])
    def test_invalid_raises(self, text: str) -> None:
        with pytest.raises(InvalidMotion, match="Invalid motion input"):
            Motion.parse(text)


class TestButton:
    def test_creation(self) -> None:
        assert Button.parse("HS") == Button("HS")

    def test_invalid_raises(self) -> None:
        with pytest.raises(InvalidButton):
            Button.parse("69lol")


class TestModifier:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("j", Modifier.JUMP),
            ("sj", Modifier.SUPER_JUMP),
            ("jc", Modifier.JUMP_CANCEL),
            ("c", Modifier.CLOSE),
            ("f", Modifier.FAR),
            ("tk", Modifier.TIGER_KNEE),
        ],
    )
    def test_dotted_and_undotted(self, text: str, expected: Modifier) -> None:
        assert Modifier.parse(text) is expected
        assert Modifier.parse(text + ".") is expected
        assert str(expected) == text + "."

    @pytest.mark.parametrize("text", ["cl", "cr", "st", "", "J"])
    def test_unknown_raises(self, text: str) -> None:
        with pytest.raises(InvalidModifier):
            Modifier.parse(text)


class TestMoveParsing:
    def test_jump_236h(self) -> None:
        assert Move.parse("j.236H") == Move(Modifier.JUMP, Motion("236"), Button("H"))

    def test_charge(self) -> None:
        assert Move.parse("[4]6A") == Move(Modifier.NONE, Motion("[4]6"), Button("A"))

    def test_close_slash(self) -> None:
        assert Move.parse("c.S") == Move(Modifier.CLOSE, Motion("5"), Button("S"))

    def test_heavy_dp(self) -> None:
        move = Move.parse("623Hp")
        assert move.motion == Motion("623")
        assert move.button == Button("Hp")

    def test_bare_jump_prefix(self) -> None:
        assert Move.parse("j236H") == Move(Modifier.JUMP, Motion("236"), Button("H"))

    def test_bare_jump_cancel_is_not_split(self) -> None:
        assert Move.parse("jc8H").modifier is Modifier.JUMP_CANCEL

    def test_bare_tiger_knee(self) -> None:
        assert Move.parse("tk236K").modifier is Modifier.TIGER_KNEE

    def test_bare_close(self) -> None:
        assert Move.parse("c5S").modifier is Modifier.CLOSE

    def test_surrounding_whitespace(self) -> None:
        assert Move.parse("  2MK\t") == Move(Modifier.NONE, Motion("2"), Button("MK"))

    def test_invalid_modifier_raises(self) -> None:
        with pytest.raises(InvalidModifier):
            Move.parse("cr.2MK")

    def test_trailing_digit_in_button_raises(self) -> None:
        with pytest.raises(InvalidButton):
            Move.parse("236H5")

    def test_missing_button_raises(self) -> None:
        with pytest.raises(InvalidButton):
            Move.parse("236")


class TestMoveRendering:
    @pytest.mark.parametrize("text", ["2MK", "j.236H", "[4]6A", "c.5S", "jc.8H"])
    def test_canonical_roundtrip(self, text: str) -> None:
        assert str(Move.parse(text)) == text

    def test_neutral_is_explicit(self) -> None:
        assert str(Move.parse("c.S")) == "c.5S"

    def test_bare_prefix_renders_dotted(self) -> None:
        assert str(Move.parse("j236H")) == "j.236H"
