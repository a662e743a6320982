"""
Shared tier builder machinery.

A build runs in two phases. The declare phase finds or creates every
token the tier needs, giving new tokens placeholder literals, so that
references between tokens of the same tier can resolve regardless of
declaration order. The resolve phase then resolves each token's Light
and Dark references in declaration order and writes any value that
changed.
"""

from __future__ import annotations

import logging

from tokengraph.core.ir import LiteralValue, Mode, Tier, Token, TokenSpec, Value, ValueType
from tokengraph.core.palettes import parse_number_value
from tokengraph.resolution import ResolutionEngine, fallback_color
from tokengraph.store import MODES, TokenStore

logger = logging.getLogger(__name__)


class TierBuilder:
    """Builds one tier from a list of token specs."""

    tier: Tier

    def __init__(self, store: TokenStore, engine: ResolutionEngine | None = None):
        self.store = store
        self.engine = engine or ResolutionEngine(store)

    def specs(self) -> list[TokenSpec]:
        raise NotImplementedError

    def build(self) -> int:
        """Declare then resolve every token of the tier. Returns the token count."""
        specs = self.specs()
        declared = [(self.declare(spec), spec) for spec in specs]
        for token, spec in declared:
            for mode in MODES:
                self.write(token, spec, mode)
        logger.info(f"Built {len(specs)} {self.tier} tokens")
        return len(specs)

    def declare(self, spec: TokenSpec) -> Token:
        existing = self.store.find(self.tier, spec.name)
        if existing is not None:
            return existing
        return self.store.create(
            self.tier,
            spec.name,
            {mode: self.placeholder(spec, mode) for mode in MODES},
            value_type=spec.value_type,
            group=spec.group,
        )

    def placeholder(self, spec: TokenSpec, mode: Mode) -> Value:
        if spec.value_type == ValueType.FLOAT:
            return LiteralValue(value=0.0)
        if spec.value_type == ValueType.STRING:
            return LiteralValue(value="")
        return LiteralValue(value=fallback_color(spec.name, "", mode))

    def value_for(self, spec: TokenSpec, mode: Mode) -> Value:
        reference = spec.references.get(mode, "")
        if spec.value_type == ValueType.FLOAT:
            return LiteralValue(value=parse_number_value(reference))
        if spec.value_type == ValueType.STRING:
            return LiteralValue(value=reference)
        return self.engine.resolve(self.tier, spec.name, reference, mode)

    def write(self, token: Token, spec: TokenSpec, mode: Mode) -> None:
        value = self.value_for(spec, mode)
        current = self.store.find(self.tier, token.name) or token
        if current.value_for(mode) != value:
            self.store.set_value(current, mode, value)
