"""
Reference resolution engine.

Turns a symbolic reference emitted by a tier vocabulary into either an
alias to an existing lower-tier token or a literal value. Resolution is
total: an unresolvable reference ends in a context-dependent fallback
literal, never an exception.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from tokengraph.core.ir import (
    HexRef,
    KeywordRef,
    Mode,
    NamedRef,
    Resolution,
    Tier,
    Token,
    Value,
    classify_reference,
)
from tokengraph.store import TokenStore

from .context import ResolutionContext
from .strategies import DEFAULT_STRATEGIES, Strategy

logger = logging.getLogger(__name__)

ReferenceInput = str | NamedRef | HexRef | KeywordRef


class ResolutionEngine:
    """Runs the ordered strategy chain against a token store."""

    def __init__(self, store: TokenStore, strategies: Sequence[Strategy] = DEFAULT_STRATEGIES):
        self.store = store
        self.strategies = tuple(strategies)

    def explain(
        self, target_tier: Tier, target_name: str, reference: ReferenceInput, mode: Mode
    ) -> Resolution:
        """Resolve a reference and report which strategy produced the value."""
        if isinstance(reference, str):
            reference = classify_reference(reference)

        existing = self.store.find(target_tier, target_name)
        ctx = ResolutionContext(
            store=self.store,
            target_tier=target_tier,
            target_name=target_name,
            reference=reference,
            mode=mode,
            target_id=existing.id if existing else None,
        )

        for strategy in self.strategies:
            result = strategy(ctx)
            if result is not None:
                self._log(ctx, result)
                return result

        result = ctx.fallback()
        self._log(ctx, result)
        return result

    def resolve(
        self, target_tier: Tier, target_name: str, reference: ReferenceInput, mode: Mode
    ) -> Value:
        return self.explain(target_tier, target_name, reference, mode).value

    def resolve_into(self, token: Token, mode: Mode, reference: ReferenceInput) -> Token:
        """Resolve for an existing token and write the value through the store."""
        value = self.resolve(token.tier, token.name, reference, mode)
        return self.store.set_value(token, mode, value)

    def _log(self, ctx: ResolutionContext, result: Resolution) -> None:
        where = f"{ctx.target_tier}/{ctx.target_name}[{ctx.mode}]"
        if result.strategy == "fallback":
            logger.warning(f"{where}: {ctx.text!r} unresolved, fallback literal used")
        elif result.strategy == "cycle-guard":
            logger.info(f"{where}: {ctx.text!r} refers back to the target, literal used")
        elif result.matched_name:
            logger.debug(
                f"{where}: {ctx.text!r} -> {result.matched_tier}/{result.matched_name} "
                f"via {result.strategy}"
            )
        else:
            logger.debug(f"{where}: {ctx.text!r} parsed as literal")
