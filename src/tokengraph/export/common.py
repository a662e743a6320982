"""
Helpers shared by the exporters: CSS variable naming and value formatting.
"""

from __future__ import annotations

import logging

from tokengraph.core.color import color_to_hex
from tokengraph.core.ir import AliasValue, Color, LiteralValue, Tier, Token, Value
from tokengraph.core.naming import to_kebab
from tokengraph.store import TokenStore

logger = logging.getLogger(__name__)


def css_variable_names(store: TokenStore) -> dict[str, str]:
    """Map token id to a CSS custom property name (without ``--``).

    Names are the kebab-case token names. Lower tiers claim names first;
    a higher-tier token whose name is already taken is prefixed with its
    tier (``semantic-transparent``).
    """
    names: dict[str, str] = {}
    taken: set[str] = set()
    for tier in Tier:
        for token in store.tokens(tier):
            name = to_kebab(token.name)
            if name in taken:
                name = f"{tier}-{name}"
            taken.add(name)
            names[token.id] = name
    return names


def format_literal(value: Color | float | str) -> str:
    if isinstance(value, Color):
        return color_to_hex(value)
    if isinstance(value, float | int):
        return f"{value:g}px"
    return value


def format_css_value(value: Value | None, names: dict[str, str]) -> str:
    """``var(--target)`` for aliases, hex/px/raw text for literals."""
    if isinstance(value, AliasValue):
        target = names.get(value.token_id)
        if target is None:
            logger.warning(f"Alias to unknown token {value.token_id}")
            return "initial"
        return f"var(--{target})"
    if isinstance(value, LiteralValue):
        return format_literal(value.value)
    return "initial"


def all_tokens(store: TokenStore) -> list[Token]:
    return [token for tier in Tier for token in store.tokens(tier)]
