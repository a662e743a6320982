"""
Tailwind CSS configuration export.

Colors, radii, spacing and shadows point at the CSS custom properties written by
the CSS exporter, so the config works with class-based dark mode without
duplicating any values.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from tokengraph.core.ir import Tier, ValueType
from tokengraph.core.naming import to_kebab
from tokengraph.store import TokenStore

from .common import css_variable_names

CONTENT_GLOBS = [
    "./pages/**/*.{js,jsx,ts,tsx}",
    "./components/**/*.{js,jsx,ts,tsx}",
    "./app/**/*.{js,jsx,ts,tsx}",
    "./src/**/*.{js,jsx,ts,tsx}",
]

_FOREGROUND_SUFFIX = "-foreground"


def build_tailwind_config(store: TokenStore) -> dict[str, Any]:
    """Build the Tailwind config as a plain dict."""
    names = css_variable_names(store)

    semantic = [t for t in store.tokens(Tier.SEMANTIC) if t.value_type == ValueType.COLOR]
    kebab_names = {to_kebab(t.name) for t in semantic}
    paired = {
        name[: -len(_FOREGROUND_SUFFIX)]
        for name in kebab_names
        if name.endswith(_FOREGROUND_SUFFIX) and name[: -len(_FOREGROUND_SUFFIX)] in kebab_names
    }

    colors: dict[str, Any] = {}
    for token in semantic:
        key = to_kebab(token.name)
        var = f"var(--{names[token.id]})"
        if key.endswith(_FOREGROUND_SUFFIX) and key[: -len(_FOREGROUND_SUFFIX)] in paired:
            colors.setdefault(key[: -len(_FOREGROUND_SUFFIX)], {})["foreground"] = var
        elif key in paired:
            colors.setdefault(key, {})["DEFAULT"] = var
        else:
            colors[key] = var

    # Palette shades nest under their family, next to any semantic DEFAULT
    radius: dict[str, str] = {}
    spacing: dict[str, str] = {}
    shadows: dict[str, str] = {}
    for token in store.tokens(Tier.PRIMITIVE):
        var = f"var(--{names[token.id]})"
        family, _, shade = token.name.rpartition("-")
        if token.value_type == ValueType.FLOAT:
            scale = family or token.name
            key = shade if family else "DEFAULT"
            if scale == "radius":
                radius[key] = var
            elif scale == "spacing":
                spacing[key] = var
            continue
        if token.value_type == ValueType.STRING:
            if token.group == "shadows":
                shadows[shade if family else "DEFAULT"] = var
            continue
        if not family:
            colors.setdefault(token.name, var)
            continue
        entry = colors.setdefault(family, {})
        if isinstance(entry, str):
            entry = colors[family] = {"DEFAULT": entry}
        entry[shade] = var

    extend: dict[str, Any] = {"colors": colors}
    if radius:
        extend["borderRadius"] = radius
    if spacing:
        extend["spacing"] = spacing
    if shadows:
        extend["boxShadow"] = shadows

    return {
        "darkMode": ["class"],
        "content": CONTENT_GLOBS,
        "theme": {"extend": extend},
    }


def generate_tailwind_config(store: TokenStore) -> str:
    """Render the config as a ``tailwind.config.js`` module."""
    config = build_tailwind_config(store)
    body = json.dumps(config, indent=2)
    return f"/** @type {{import('tailwindcss').Config}} */\nmodule.exports = {body};\n"


def export_tailwind_file(store: TokenStore, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(generate_tailwind_config(store), encoding="utf-8")
    return output_path

