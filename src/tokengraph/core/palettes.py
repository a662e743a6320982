"""
Primitive palettes and number scales.

The primary palette is derived from a single brand color by shifting
saturation and lightness in HSL space; grayscale and support families
are fixed Tailwind scales. Radius and spacing are numeric primitives.
"""

from __future__ import annotations

import re

from .color import hex_to_hsl, hsl_to_hex, parse_color

SHADES = ["50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950"]


def _scale(*values: str) -> dict[str, str]:
    return {shade: value.upper() for shade, value in zip(SHADES, values, strict=True)}


# =============================================================================
# Fixed families
# =============================================================================

GRAYSCALE_PALETTES: dict[str, dict[str, str]] = {
    "gray": _scale(
        "#f9fafb", "#f3f4f6", "#e5e7eb", "#d1d5db", "#9ca3af", "#6b7280",
        "#4b5563", "#374151", "#1f2937", "#111827", "#030712",
    ),
    "slate": _scale(
        "#f8fafc", "#f1f5f9", "#e2e8f0", "#cbd5e1", "#94a3b8", "#64748b",
        "#475569", "#334155", "#1e293b", "#0f172a", "#020617",
    ),
    "zinc": _scale(
        "#fafafa", "#f4f4f5", "#e4e4e7", "#d4d4d8", "#a1a1aa", "#71717a",
        "#52525b", "#3f3f46", "#27272a", "#18181b", "#09090b",
    ),
    "neutral": _scale(
        "#fafafa", "#f5f5f5", "#e5e5e5", "#d4d4d4", "#a3a3a3", "#737373",
        "#525252", "#404040", "#262626", "#171717", "#0a0a0a",
    ),
    "stone": _scale(
        "#fafaf9", "#f5f5f4", "#e7e5e4", "#d6d3d1", "#a8a29e", "#78716c",
        "#57534e", "#44403c", "#292524", "#1c1917", "#0c0a09",
    ),
}  # fmt: skip

SUPPORT_PALETTES: dict[str, dict[str, str]] = {
    "red": _scale(
        "#fef2f2", "#fee2e2", "#fecaca", "#fca5a5", "#f87171", "#ef4444",
        "#dc2626", "#b91c1c", "#991b1b", "#7f1d1d", "#450a0a",
    ),
    "green": _scale(
        "#f0fdf4", "#dcfce7", "#bbf7d0", "#86efac", "#4ade80", "#22c55e",
        "#16a34a", "#15803d", "#166534", "#14532d", "#052e16",
    ),
    "amber": _scale(
        "#fffbeb", "#fef3c7", "#fde68a", "#fcd34d", "#fbbf24", "#f59e0b",
        "#d97706", "#b45309", "#92400e", "#78350f", "#451a03",
    ),
    "blue": _scale(
        "#eff6ff", "#dbeafe", "#bfdbfe", "#93c5fd", "#60a5fa", "#3b82f6",
        "#2563eb", "#1d4ed8", "#1e40af", "#1e3a8a", "#172554",
    ),
}  # fmt: skip

# "DEFAULT" keys produce a token named after the scale itself ("radius")
RADIUS_TOKENS: dict[str, str] = {
    "none": "0px",
    "sm": "0.125rem",
    "DEFAULT": "0.25rem",
    "md": "0.375rem",
    "lg": "0.5rem",
    "xl": "0.75rem",
    "2xl": "1rem",
    "3xl": "1.5rem",
    "full": "9999px",
}

SPACING_TOKENS: dict[str, str] = {
    "0": "0px",
    "px": "1px",
    "1": "0.25rem",
    "2": "0.5rem",
    "3": "0.75rem",
    "4": "1rem",
    "5": "1.25rem",
    "6": "1.5rem",
    "8": "2rem",
    "10": "2.5rem",
    "12": "3rem",
    "16": "4rem",
    "20": "5rem",
    "24": "6rem",
    "32": "8rem",
}

NUMBER_SCALES: dict[str, dict[str, str]] = {
    "radius": RADIUS_TOKENS,
    "spacing": SPACING_TOKENS,
}

# Box shadows as CSS text, (Light, Dark). Dark doubles the shadow opacity.
SHADOW_TOKENS: dict[str, tuple[str, str]] = {
    "sm": (
        "0 1px 2px 0 rgba(0, 0, 0, 0.05)",
        "0 1px 2px 0 rgba(0, 0, 0, 0.1)",
    ),
    "md": (
        "0 4px 6px -1px rgba(0, 0, 0, 0.1), 0 2px 4px -2px rgba(0, 0, 0, 0.1)",
        "0 4px 6px -1px rgba(0, 0, 0, 0.2), 0 2px 4px -2px rgba(0, 0, 0, 0.2)",
    ),
    "lg": (
        "0 10px 15px -3px rgba(0, 0, 0, 0.1), 0 4px 6px -4px rgba(0, 0, 0, 0.1)",
        "0 10px 15px -3px rgba(0, 0, 0, 0.2), 0 4px 6px -4px rgba(0, 0, 0, 0.2)",
    ),
    "xl": (
        "0 20px 25px -5px rgba(0, 0, 0, 0.1), 0 8px 10px -6px rgba(0, 0, 0, 0.1)",
        "0 20px 25px -5px rgba(0, 0, 0, 0.2), 0 8px 10px -6px rgba(0, 0, 0, 0.2)",
    ),
    "2xl": (
        "0 25px 50px -12px rgba(0, 0, 0, 0.25)",
        "0 25px 50px -12px rgba(0, 0, 0, 0.5)",
    ),
}

_NUMBER_RE = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*(px|rem)?\s*$")


# =============================================================================
# Generation
# =============================================================================


def generate_color_palette(primary_hex: str) -> dict[str, str]:
    """Derive a 50-950 palette from a brand color.

    Shade 500 is the brand color itself. Lighter shades lose saturation and
    gain lightness, darker shades the reverse, with clamps keeping every
    shade inside a usable range.
    """
    base = parse_color(primary_hex)[:7]
    h, s, lightness = hex_to_hsl(base)

    return {
        "50": hsl_to_hex(h, max(s - 30, 10), min(lightness + 45, 97)),
        "100": hsl_to_hex(h, max(s - 25, 15), min(lightness + 40, 94)),
        "200": hsl_to_hex(h, max(s - 20, 20), min(lightness + 30, 86)),
        "300": hsl_to_hex(h, max(s - 10, 25), min(lightness + 20, 78)),
        "400": hsl_to_hex(h, max(s - 5, 30), min(lightness + 10, 70)),
        "500": base,
        "600": hsl_to_hex(h, min(s + 5, 90), max(lightness - 10, 25)),
        "700": hsl_to_hex(h, min(s + 10, 95), max(lightness - 20, 20)),
        "800": hsl_to_hex(h, min(s + 15, 98), max(lightness - 30, 15)),
        "900": hsl_to_hex(h, min(s + 20, 100), max(lightness - 40, 10)),
        "950": hsl_to_hex(h, min(s + 15, 95), max(lightness - 45, 5)),
    }


def parse_number_value(value: str | float) -> float:
    """Convert "8px", "0.5rem" or "4" to a float (rem at 16px)."""
    if isinstance(value, int | float):
        return float(value)

    match = _NUMBER_RE.match(value)
    if not match:
        raise ValueError(f"Not a numeric token value: {value!r}")

    number = float(match.group(1))
    if match.group(2) == "rem":
        return number * 16
    return number


def number_token_name(scale: str, key: str) -> str:
    """``radius`` + ``DEFAULT`` -> ``radius``; ``spacing`` + ``4`` -> ``spacing-4``."""
    if key == "DEFAULT":
        return scale
    return f"{scale}-{key}"
