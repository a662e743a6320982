"""Tests for palette generation and number scales."""

import pytest

from tokengraph.core.color import hex_to_hsl
from tokengraph.core.palettes import (
    GRAYSCALE_PALETTES,
    SHADES,
    SUPPORT_PALETTES,
    generate_color_palette,
    number_token_name,
    parse_number_value,
)


class TestGenerateColorPalette:
    def test_shade_500_is_the_input(self) -> None:
        palette = generate_color_palette("#3b82f6")
        assert palette["500"] == "#3B82F6"

    def test_all_shades_present(self) -> None:
        assert list(generate_color_palette("#3B82F6")) == SHADES

    def test_lightness_decreases_with_shade(self) -> None:
        palette = generate_color_palette("#3B82F6")
        lightness = [hex_to_hsl(palette[shade])[2] for shade in SHADES]
        assert lightness == sorted(lightness, reverse=True)

    def test_clamps_keep_extremes_usable(self) -> None:
        palette = generate_color_palette("#FFFFFF")
        assert hex_to_hsl(palette["50"])[2] <= 97.5
        palette = generate_color_palette("#000000")
        assert hex_to_hsl(palette["950"])[2] >= 4.5


class TestFixedFamilies:
    def test_every_family_has_every_shade(self) -> None:
        for palette in {**GRAYSCALE_PALETTES, **SUPPORT_PALETTES}.values():
            assert list(palette) == SHADES

    def test_values_are_uppercase_hex(self) -> None:
        assert GRAYSCALE_PALETTES["gray"]["50"] == "#F9FAFB"


class TestNumberValues:
    @pytest.mark.parametrize(
        "raw,expected",
        [("8px", 8.0), ("1rem", 16.0), ("0.5rem", 8.0), ("4", 4.0), (2, 2.0), ("9999px", 9999.0)],
    )
    def test_parse_number_value(self, raw, expected: float) -> None:
        assert parse_number_value(raw) == expected

    def test_invalid_number(self) -> None:
        with pytest.raises(ValueError):
            parse_number_value("wide")

    def test_number_token_name(self) -> None:
        assert number_token_name("radius", "DEFAULT") == "radius"
        assert number_token_name("spacing", "4") == "spacing-4"
