"""Tests for the color codec."""

import logging

import pytest

from tokengraph.core.color import (
    BLACK,
    TRANSPARENT,
    WHITE,
    color_to_hex,
    hex_to_color,
    hex_to_hsl,
    hsl_to_hex,
    is_color_literal,
    parse_color,
    parse_color_value,
)
from tokengraph.core.ir import Color


class TestHexConversion:
    """hex_to_color / color_to_hex."""

    @pytest.mark.parametrize("text", ["#3b82f6", "#3B82F6", "#000000", "#ffffff", "#0a0B0c"])
    def test_six_digit_round_trip(self, text: str) -> None:
        assert color_to_hex(hex_to_color(text)) == text.upper()

    def test_short_form_expands(self) -> None:
        assert hex_to_color("#fff") == WHITE
        assert color_to_hex(hex_to_color("#f00")) == "#FF0000"

    def test_short_form_with_alpha(self) -> None:
        color = hex_to_color("#0008")
        assert color.a == pytest.approx(0x88 / 255)

    def test_alpha_emitted_only_below_one(self) -> None:
        assert color_to_hex(Color(r=0, g=0, b=0, a=1.0)) == "#000000"
        assert color_to_hex(hex_to_color("#00000080")) == "#00000080"

    @pytest.mark.parametrize("text", ["#12345", "not-a-color", "#12", ""])
    def test_invalid_hex_degrades_to_black(
        self, text: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="tokengraph.core.color"):
            assert hex_to_color(text) == BLACK
        assert "Invalid hex color" in caplog.text

    def test_invalid_hex_hsl_is_black(self) -> None:
        assert hex_to_hsl("#12") == (0.0, 0.0, 0.0)


class TestParseColor:
    """Lenient parsing of every supported notation."""

    def test_transparent(self) -> None:
        assert parse_color_value("transparent") == TRANSPARENT
        assert parse_color("transparent") == "#00000000"

    def test_named_colors(self) -> None:
        assert parse_color("magenta") == "#FF00FF"
        assert parse_color("Grey") == "#808080"
        assert parse_color_value("black") == BLACK

    def test_rgb_function(self) -> None:
        assert parse_color("rgb(255, 0, 0)") == "#FF0000"

    def test_rgba_function(self) -> None:
        color = parse_color_value("rgba(0, 0, 0, 0.4)")
        assert color.a == pytest.approx(0.4)
        assert parse_color("rgba(0, 0, 0, 0.4)") == "#00000066"

    def test_whitespace_is_ignored(self) -> None:
        assert parse_color("  #3b82f6 ") == "#3B82F6"

    def test_unrecognized_degrades_to_black(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="tokengraph.core.color"):
            assert parse_color("not-a-color") == "#000000"
        assert "not-a-color" in caplog.text

    def test_is_color_literal(self) -> None:
        assert is_color_literal("#abc")
        assert is_color_literal("rgba(1, 2, 3, 0.5)")
        assert is_color_literal("white")
        assert not is_color_literal("gray-50")
        assert not is_color_literal("")


class TestHsl:
    def test_red(self) -> None:
        h, s, lightness = hex_to_hsl("#FF0000")
        assert h == pytest.approx(0)
        assert s == pytest.approx(100)
        assert lightness == pytest.approx(50)

    def test_hsl_to_hex(self) -> None:
        assert hsl_to_hex(0, 100, 50) == "#FF0000"
        assert hsl_to_hex(120, 100, 25) == "#008000"
