"""
Resolution context shared by the strategy functions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from tokengraph.core.ir import (
    AliasValue,
    Color,
    HexRef,
    KeywordRef,
    LiteralValue,
    Mode,
    NamedRef,
    Resolution,
    Tier,
    Token,
)
from tokengraph.store import TokenStore

from .fallbacks import fallback_color

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolutionContext:
    """One resolution request against a store snapshot."""

    store: TokenStore
    target_tier: Tier
    target_name: str
    reference: NamedRef | HexRef | KeywordRef
    mode: Mode
    target_id: str | None = None

    @property
    def text(self) -> str:
        return self.reference.text

    @property
    def lower_tiers(self) -> list[Tier]:
        return self.target_tier.below()

    @property
    def is_named(self) -> bool:
        return isinstance(self.reference, NamedRef)

    @property
    def is_literal(self) -> bool:
        return isinstance(self.reference, HexRef)

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def find(self, tier: Tier, name: str) -> Token | None:
        """Exact lookup that never returns the target or a token leading back to it."""
        if not name:
            return None
        token = self.store.find(tier, name)
        if token is None:
            return None
        if token.id == self.target_id:
            return None
        if self._leads_back(token):
            logger.warning(
                f"Rejected alias {self.target_tier}/{self.target_name} -> {tier}/{name} "
                f"[{self.mode}]: cycle"
            )
            return None
        return token

    def find_lower(self, name: str) -> Token | None:
        """Exact lookup across the tiers below the target, nearest first."""
        for tier in self.lower_tiers:
            token = self.find(tier, name)
            if token is not None:
                return token
        return None

    def _leads_back(self, candidate: Token) -> bool:
        """True when following the candidate's alias chain revisits a token or hits the target."""
        if self.target_id is None:
            return False
        seen: set[str] = set()
        current: Token | None = candidate
        while current is not None:
            if current.id == self.target_id or current.id in seen:
                return True
            seen.add(current.id)
            next_id = current.alias_target(self.mode)
            if next_id is None:
                return False
            current = self.store.get_by_id(next_id)
        return False

    # -------------------------------------------------------------------------
    # Outcomes
    # -------------------------------------------------------------------------

    def alias(self, token: Token, strategy: str) -> Resolution:
        return Resolution(
            value=AliasValue(token_id=token.id),
            strategy=strategy,
            matched_name=token.name,
            matched_tier=token.tier,
        )

    def literal(self, color: Color, strategy: str) -> Resolution:
        return Resolution(value=LiteralValue(value=color), strategy=strategy)

    def fallback(self, strategy: str = "fallback") -> Resolution:
        return self.literal(fallback_color(self.target_name, self.text, self.mode), strategy)
