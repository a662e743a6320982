"""
Primitive tier: raw palette colors, number scales and box shadows.
"""

from __future__ import annotations

import logging

from tokengraph.core.ir import GenerationRequest, Mode, Tier, TokenSpec, ValueType
from tokengraph.core.palettes import (
    GRAYSCALE_PALETTES,
    NUMBER_SCALES,
    SHADOW_TOKENS,
    SUPPORT_PALETTES,
    generate_color_palette,
    number_token_name,
)
from tokengraph.resolution import ResolutionEngine
from tokengraph.store import TokenStore

from .base import TierBuilder

logger = logging.getLogger(__name__)


def _literal(
    name: str, value: str, group: str, value_type: ValueType = ValueType.COLOR
) -> TokenSpec:
    # Identical in both modes
    return TokenSpec(
        name=name,
        group=group,
        value_type=value_type,
        references={Mode.LIGHT: value, Mode.DARK: value},
    )


def _shadow(key: str, light: str, dark: str) -> TokenSpec:
    return TokenSpec(
        name=f"shadow-{key}",
        group="shadows",
        value_type=ValueType.STRING,
        references={Mode.LIGHT: light, Mode.DARK: dark},
    )


class PrimitiveBuilder(TierBuilder):
    """Color families, transparent, radius and spacing scales, shadows."""

    tier = Tier.PRIMITIVE

    def __init__(
        self,
        store: TokenStore,
        request: GenerationRequest,
        engine: ResolutionEngine | None = None,
    ):
        super().__init__(store, engine)
        self.request = request

    def palettes(self) -> dict[str, dict[str, str]]:
        palettes = {"primary": generate_color_palette(self.request.primary_color)}
        for family in self.request.grayscales:
            if family not in GRAYSCALE_PALETTES:
                logger.warning(f"Unknown grayscale family {family!r} skipped")
                continue
            palettes[family] = GRAYSCALE_PALETTES[family]
        palettes.update(SUPPORT_PALETTES)
        return palettes

    def specs(self) -> list[TokenSpec]:
        specs = []
        for family, palette in self.palettes().items():
            for shade, hex_value in palette.items():
                specs.append(_literal(f"{family}-{shade}", hex_value, f"colors/{family}"))

        specs.append(_literal("transparent", "transparent", "colors/special"))

        for scale, values in NUMBER_SCALES.items():
            for key, raw in values.items():
                specs.append(_literal(number_token_name(scale, key), raw, scale, ValueType.FLOAT))

        for key, (light, dark) in SHADOW_TOKENS.items():
            specs.append(_shadow(key, light, dark))
        return specs
