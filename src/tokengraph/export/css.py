"""
CSS custom property export.

Light values go in ``:root``; Dark values that differ from Light go in a
``.dark`` block, matching class-based dark mode.
"""

from __future__ import annotations

from pathlib import Path

from tokengraph.core.ir import Mode
from tokengraph.store import TokenStore

from .common import all_tokens, css_variable_names, format_css_value


def generate_css(store: TokenStore) -> str:
    """
    Generate CSS from every token in the store.

    Args:
        store: Initialized token store

    Returns:
        CSS string with :root and .dark selectors
    """
    names = css_variable_names(store)
    tokens = all_tokens(store)

    lines: list[str] = []
    lines.append("/* tokengraph design tokens */")
    lines.append("/* Auto-generated - do not edit */")
    lines.append("")

    lines.append(":root {")
    for token in tokens:
        value = format_css_value(token.value_for(Mode.LIGHT), names)
        lines.append(f"  --{names[token.id]}: {value};")
    lines.append("}")
    lines.append("")

    dark_lines = []
    for token in tokens:
        light = token.value_for(Mode.LIGHT)
        dark = token.value_for(Mode.DARK)
        if dark is not None and dark != light:
            dark_lines.append(f"  --{names[token.id]}: {format_css_value(dark, names)};")

    if dark_lines:
        lines.append(".dark {")
        lines.extend(dark_lines)
        lines.append("}")
        lines.append("")

    return "\n".join(lines)


def export_css_file(store: TokenStore, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(generate_css(store), encoding="utf-8")
    return output_path
