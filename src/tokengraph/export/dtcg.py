"""
W3C Design Token Community Group (DTCG) tokens.json export.

Tokens nest by tier, then by group path, then by name. Aliases become
DTCG references (``{primitive.colors.gray.gray-50}``). The Light value
is the token's ``$value``; a differing Dark value is carried under
``$extensions``.
See: https://design-tokens.github.io/community-group/format/
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from tokengraph.core.color import color_to_hex
from tokengraph.core.ir import AliasValue, Color, LiteralValue, Mode, Token, Value, ValueType
from tokengraph.store import TokenStore

from .common import all_tokens

MODES_EXTENSION = "tokengraph.modes"

_DTCG_TYPES = {
    ValueType.COLOR: "color",
    ValueType.FLOAT: "dimension",
}


def token_path(token: Token) -> list[str]:
    """DTCG path segments for a token."""
    groups = [segment for segment in token.group.split("/") if segment]
    return [token.tier.value, *groups, token.name]


def _dtcg_value(value: Value | None, paths: dict[str, list[str]]) -> Any:
    if isinstance(value, AliasValue):
        path = paths.get(value.token_id)
        return "{" + ".".join(path) + "}" if path else None
    if isinstance(value, LiteralValue):
        literal = value.value
        if isinstance(literal, Color):
            return color_to_hex(literal)
        if isinstance(literal, float | int):
            return f"{literal:g}px"
        return literal
    return None


def generate_dtcg_tokens(store: TokenStore) -> dict[str, Any]:
    """Generate W3C DTCG format design tokens from the store.

    Args:
        store: Initialized token store.

    Returns:
        DTCG-formatted dict suitable for writing as tokens.json.
    """
    tokens = all_tokens(store)
    paths = {token.id: token_path(token) for token in tokens}

    dtcg: dict[str, Any] = {}
    for token in tokens:
        *parents, leaf = paths[token.id]
        node = dtcg
        for segment in parents:
            node = node.setdefault(segment, {})

        entry: dict[str, Any] = {}
        dtcg_type = _DTCG_TYPES.get(token.value_type)
        if dtcg_type:
            entry["$type"] = dtcg_type
        light = _dtcg_value(token.value_for(Mode.LIGHT), paths)
        dark = _dtcg_value(token.value_for(Mode.DARK), paths)
        entry["$value"] = light
        if dark != light:
            entry["$extensions"] = {MODES_EXTENSION: {"dark": dark}}
        node[leaf] = entry

    return dtcg


def export_dtcg_file(store: TokenStore, output_path: Path) -> Path:
    """Generate DTCG tokens and write to a JSON file.

    Args:
        store: Initialized token store.
        output_path: Path to write tokens.json.

    Returns:
        Path to the written file.
    """
    tokens = generate_dtcg_tokens(store)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(tokens, indent=2),
        encoding="utf-8",
    )

    return output_path
