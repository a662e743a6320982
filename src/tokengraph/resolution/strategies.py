"""
Resolution strategies.

Each strategy takes a ``ResolutionContext`` and returns a ``Resolution``
or None to pass. The engine runs them in ``DEFAULT_STRATEGIES`` order and
the first non-None result wins. ``fallback`` never passes, so the chain
is total.
"""

from __future__ import annotations

from collections.abc import Callable

from tokengraph.core.color import is_color_literal, parse_color_value
from tokengraph.core.ir import NamedRef, Resolution, Tier
from tokengraph.core.naming import case_variants, split_prefix_suffix, to_kebab

from .context import ResolutionContext

Strategy = Callable[[ResolutionContext], Resolution | None]

# Symmetric pairs that would alias a token to its own concept
CYCLE_PAIRS = frozenset(
    {
        frozenset({"foreground", "textColor"}),
        frozenset({"background", "backgroundColor"}),
    }
)

# Semantic roles a component reference may mention inside a longer name
SEMANTIC_KEYWORDS = [
    "foreground", "background", "border", "ring", "primary", "secondary",
    "accent", "muted", "destructive", "success", "warning", "overlay",
    "transparent", "darkBg", "darkText", "defaultBackground",
    "defaultForeground", "secondaryBackground", "secondaryForeground",
    "outlineBackground", "outlineForeground", "outlineBorder", "white",
]  # fmt: skip


def cycle_guard(ctx: ResolutionContext) -> Resolution | None:
    """Self references and known symmetric pairs resolve to a literal."""
    if ctx.text == ctx.target_name or frozenset({ctx.text, ctx.target_name}) in CYCLE_PAIRS:
        return ctx.fallback("cycle-guard")
    return None


def exact_peer(ctx: ResolutionContext) -> Resolution | None:
    """Semantic name match: peers for semantic targets, the semantic tier for components."""
    if ctx.is_literal:
        return None
    if ctx.target_tier == Tier.SEMANTIC and "-" not in ctx.text:
        token = ctx.find(Tier.SEMANTIC, ctx.text)
    elif ctx.target_tier == Tier.COMPONENT:
        token = ctx.find(Tier.SEMANTIC, ctx.text)
    else:
        return None
    return ctx.alias(token, "exact-peer") if token else None


def exact_lower(ctx: ResolutionContext) -> Resolution | None:
    if ctx.is_literal:
        return None
    token = ctx.find_lower(ctx.text)
    return ctx.alias(token, "exact-lower") if token else None


def case_convention(ctx: ResolutionContext) -> Resolution | None:
    """Retry the exact lookup with kebab and camel spellings."""
    if not ctx.is_named:
        return None
    for variant in case_variants(ctx.text):
        token = ctx.find_lower(variant)
        if token:
            return ctx.alias(token, "case-convention")
    return None


def decomposition(ctx: ResolutionContext) -> Resolution | None:
    """Match on the suffix or prefix of the name, then on embedded semantic roles."""
    if not ctx.is_named or not ctx.lower_tiers:
        return None

    parts = split_prefix_suffix(to_kebab(ctx.text))
    if parts:
        prefix, suffix = parts
        for piece in (suffix, prefix):
            token = ctx.find_lower(piece)
            if token:
                return ctx.alias(token, "decomposition")

    if ctx.target_tier == Tier.COMPONENT:
        lowered = ctx.text.lower()
        for keyword in SEMANTIC_KEYWORDS:
            if keyword.lower() in lowered:
                token = ctx.find(Tier.SEMANTIC, keyword)
                if token:
                    return ctx.alias(token, "semantic-keyword")
    return None


def shade_guess(ctx: ResolutionContext) -> Resolution | None:
    """Bare family names map to their 500 shade, bare numbers to gray."""
    if not ctx.is_named or not ctx.text or "-" in ctx.text:
        return None
    if Tier.PRIMITIVE not in ctx.lower_tiers:
        return None

    if ctx.text.isdigit():
        name = f"gray-{ctx.text}"
    else:
        name = f"{ctx.text.lower()}-500"
    token = ctx.find(Tier.PRIMITIVE, name)
    return ctx.alias(token, "shade-guess") if token else None


def literal_parse(ctx: ResolutionContext) -> Resolution | None:
    if isinstance(ctx.reference, NamedRef) and not is_color_literal(ctx.text):
        return None
    return ctx.literal(parse_color_value(ctx.text), "literal")


def fallback(ctx: ResolutionContext) -> Resolution:
    return ctx.fallback()


DEFAULT_STRATEGIES: tuple[Strategy, ...] = (
    cycle_guard,
    exact_peer,
    exact_lower,
    case_convention,
    decomposition,
    shade_guess,
    literal_parse,
    fallback,
)
