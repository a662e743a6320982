"""
Component tier: per-component property tokens that alias semantic roles.

Button variants are named ``{variant}-{property}`` (``ghost-background``)
and grouped under ``button/{variant}``; other components are named
``{component}-{property}``.
"""

from __future__ import annotations

from tokengraph.core.ir import Tier, TokenSpec
from tokengraph.resolution import ResolutionEngine
from tokengraph.store import TokenStore

from .base import TierBuilder
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary


class ComponentBuilder(TierBuilder):
    tier = Tier.COMPONENT

    def __init__(
        self,
        store: TokenStore,
        vocabulary: Vocabulary = DEFAULT_VOCABULARY,
        engine: ResolutionEngine | None = None,
    ):
        super().__init__(store, engine)
        self.vocabulary = vocabulary

    def specs(self) -> list[TokenSpec]:
        return self.vocabulary.component_specs()
