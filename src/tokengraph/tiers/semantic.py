"""
Semantic tier: role tokens (background, primary, border, ...) that alias
primitives or, for peer references, other semantic tokens.
"""

from __future__ import annotations

from tokengraph.core.ir import Tier, TokenSpec
from tokengraph.resolution import ResolutionEngine
from tokengraph.store import TokenStore

from .base import TierBuilder
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary


class SemanticBuilder(TierBuilder):
    tier = Tier.SEMANTIC

    def __init__(
        self,
        store: TokenStore,
        vocabulary: Vocabulary = DEFAULT_VOCABULARY,
        engine: ResolutionEngine | None = None,
    ):
        super().__init__(store, engine)
        self.vocabulary = vocabulary

    def specs(self) -> list[TokenSpec]:
        return self.vocabulary.semantic_specs()
