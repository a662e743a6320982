"""
Context-dependent fallback colors.

Used when a reference cannot be resolved, or when aliasing it would form
a cycle. The choice depends only on the target name, the reference text
and the mode, so the same inputs always produce the same literal.
"""

from __future__ import annotations

from tokengraph.core.color import BLACK, TRANSPARENT, WHITE, hex_to_color
from tokengraph.core.ir import Color, Mode

MID_GRAY = hex_to_color("#808080")
FAINT_BORDER = Color(r=0.0, g=0.0, b=0.0, a=0.1)


def fallback_color(target_name: str, reference: str, mode: Mode) -> Color:
    """Pick a sensible literal for an unresolvable reference."""
    hint = f"{target_name} {reference}".lower()
    dark = mode == Mode.DARK

    if "transparent" in hint:
        return TRANSPARENT
    if "foreground" in hint:
        return WHITE if dark else BLACK
    if "background" in hint:
        return BLACK if dark else WHITE
    if "border" in hint:
        return FAINT_BORDER
    return MID_GRAY
