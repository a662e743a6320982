"""
Color codec for design tokens.

Converts between textual color notations (hex, rgb()/rgba(), keywords)
and the normalized RGBA ``Color`` used by the token store, plus the
HSL helpers the palette generator builds on.

Parsing is lenient: unrecognized text logs a warning and degrades to
opaque black rather than raising, so a bad reference never aborts a
generation pass.
"""

from __future__ import annotations

import colorsys
import logging
import re

from .ir import Color

logger = logging.getLogger(__name__)

TRANSPARENT = Color(r=0.0, g=0.0, b=0.0, a=0.0)
BLACK = Color(r=0.0, g=0.0, b=0.0)
WHITE = Color(r=1.0, g=1.0, b=1.0)

NAMED_COLORS: dict[str, str] = {
    "black": "#000000",
    "white": "#FFFFFF",
    "red": "#FF0000",
    "green": "#00FF00",
    "blue": "#0000FF",
    "yellow": "#FFFF00",
    "cyan": "#00FFFF",
    "magenta": "#FF00FF",
    "gray": "#808080",
    "grey": "#808080",
}

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_RGB_RE = re.compile(
    r"^rgba?\(\s*([\d.]+)\s*,\s*([\d.]+)\s*,\s*([\d.]+)\s*(?:,\s*([\d.]+)\s*)?\)$",
    re.IGNORECASE,
)


# =============================================================================
# Hex / RGBA
# =============================================================================


def hex_to_color(text: str) -> Color:
    """Convert #RGB, #RGBA, #RRGGBB or #RRGGBBAA to a Color.

    Anything else logs a warning and returns opaque black.
    """
    match = _HEX_RE.match((text or "").strip())
    if not match:
        logger.warning(f"Invalid hex color {text!r}, using #000000")
        return BLACK

    digits = match.group(1)
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)

    channels = [int(digits[i : i + 2], 16) / 255 for i in range(0, len(digits), 2)]
    if len(channels) == 3:
        channels.append(1.0)
    r, g, b, a = channels
    return Color(r=r, g=g, b=b, a=a)


def color_to_hex(color: Color) -> str:
    """Format a Color as uppercase #RRGGBB, with AA appended when a < 1."""
    r, g, b = (round(channel * 255) for channel in (color.r, color.g, color.b))
    text = f"#{r:02X}{g:02X}{b:02X}"
    if color.a < 1:
        text += f"{round(color.a * 255):02X}"
    return text


def _rgb_function_to_color(match: re.Match[str]) -> Color:
    r, g, b = (min(float(match.group(i)), 255.0) / 255 for i in (1, 2, 3))
    alpha = match.group(4)
    a = min(float(alpha), 1.0) if alpha is not None else 1.0
    return Color(r=r, g=g, b=b, a=a)


def parse_color_value(text: str) -> Color:
    """Parse any supported color notation into a Color.

    Unrecognized input logs a warning and returns opaque black.
    """
    stripped = (text or "").strip()
    lowered = stripped.lower()

    if lowered == "transparent":
        return TRANSPARENT
    if lowered in NAMED_COLORS:
        return hex_to_color(NAMED_COLORS[lowered])
    if stripped.startswith("#") and _HEX_RE.match(stripped):
        return hex_to_color(stripped)

    match = _RGB_RE.match(stripped)
    if match:
        return _rgb_function_to_color(match)

    logger.warning(f"Unrecognized color {text!r}, using #000000")
    return BLACK


def parse_color(text: str) -> str:
    """Normalize any supported color notation to #RRGGBB[AA]."""
    return color_to_hex(parse_color_value(text))


def is_color_literal(text: str) -> bool:
    """True when the text parses as a color without falling back."""
    stripped = (text or "").strip()
    lowered = stripped.lower()
    if lowered == "transparent" or lowered in NAMED_COLORS:
        return True
    if stripped.startswith("#") and _HEX_RE.match(stripped):
        return True
    return _RGB_RE.match(stripped) is not None


# =============================================================================
# HSL
# =============================================================================


def hex_to_hsl(hex_color: str) -> tuple[float, float, float]:
    """Convert hex to HSL as (hue degrees, saturation %, lightness %)."""
    color = hex_to_color(hex_color)
    return rgb_to_hsl(color.r, color.g, color.b)


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    hue, lightness, sat = colorsys.rgb_to_hls(r, g, b)
    return (hue * 360, sat * 100, lightness * 100)


def hsl_to_rgb(h: float, s: float, lightness: float) -> tuple[float, float, float]:
    return colorsys.hls_to_rgb((h % 360) / 360, lightness / 100, s / 100)


def hsl_to_hex(h: float, s: float, lightness: float) -> str:
    """Convert HSL (degrees, %, %) to uppercase #RRGGBB."""
    r, g, b = hsl_to_rgb(h, s, lightness)
    return color_to_hex(Color(r=r, g=g, b=b))
