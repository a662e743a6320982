"""
Token store.

Wraps a ``VariableHost`` with tier-aware lookups. Each tier maps to one
host collection with Light and Dark modes. Lookups by name go through a
lazily filled ``tier -> name -> Token`` cache that is rebuilt after a
clear-all; writes go to the host first and then refresh the cache entry.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from tokengraph.core.errors import (
    CollectionNotFoundError,
    DuplicateTokenError,
    StoreError,
    TokenContext,
)
from tokengraph.core.ir import Mode, Tier, Token, Value, ValueType

from .host import CollectionHandle, HostVariable, VariableHost

logger = logging.getLogger(__name__)

MODES = [Mode.LIGHT, Mode.DARK]


class TokenStore:
    """Tier-aware view of a host variable store."""

    def __init__(self, host: VariableHost):
        self.host = host
        self._collections: dict[Tier, CollectionHandle] = {}
        self._cache: dict[Tier, dict[str, Token]] = {}

    # -------------------------------------------------------------------------
    # Setup
    # -------------------------------------------------------------------------

    def init(self) -> None:
        """Find or create the three tier collections, each with Light and Dark."""
        for tier in Tier:
            handle = self.host.ensure_collection(tier.collection_name, [m.value for m in MODES])
            missing = [m for m in MODES if m.value not in handle.modes]
            if missing:
                raise CollectionNotFoundError(
                    f"Collection {handle.name} lacks modes {', '.join(missing)}",
                    TokenContext(tier=tier.value),
                )
            self._collections[tier] = handle
        logger.debug("Tier collections ready")

    def _collection(self, tier: Tier) -> CollectionHandle:
        handle = self._collections.get(tier)
        if handle is None:
            raise CollectionNotFoundError(
                "Token store not initialized", TokenContext(tier=tier.value)
            )
        return handle

    # -------------------------------------------------------------------------
    # Cache
    # -------------------------------------------------------------------------

    def _to_token(self, tier: Tier, variable: HostVariable) -> Token:
        mode_names = {mode_id: name for name, mode_id in self._collection(tier).modes.items()}
        values: dict[Mode, Value] = {}
        for mode_id, value in variable.values.items():
            if mode_id in mode_names:
                values[Mode(mode_names[mode_id])] = value
        return Token(
            id=variable.id,
            tier=tier,
            name=variable.name,
            group=variable.group,
            value_type=variable.value_type,
            values_by_mode=values,
        )

    def _tier_cache(self, tier: Tier) -> dict[str, Token]:
        cache = self._cache.get(tier)
        if cache is None:
            handle = self._collection(tier)
            cache = {}
            for variable in self.host.list_variables(handle.id):
                cache[variable.name] = self._to_token(tier, variable)
            self._cache[tier] = cache
        return cache

    def invalidate(self) -> None:
        self._cache.clear()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def find(self, tier: Tier, name: str) -> Token | None:
        return self._tier_cache(tier).get(name)

    def tokens(self, tier: Tier) -> list[Token]:
        """All tokens of a tier in host order."""
        return list(self._tier_cache(tier).values())

    def count(self, tier: Tier) -> int:
        return len(self._tier_cache(tier))

    def get_by_id(self, token_id: str) -> Token | None:
        for tier in Tier:
            for token in self._tier_cache(tier).values():
                if token.id == token_id:
                    return token
        return None

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def create(
        self,
        tier: Tier,
        name: str,
        initial_values: Mapping[Mode, Value],
        *,
        value_type: ValueType = ValueType.COLOR,
        group: str = "",
    ) -> Token:
        """Create a token and write its initial per-mode values.

        Raises:
            DuplicateTokenError: If the tier already has a token named ``name``.
            StoreError: If the host rejects the variable or a value.
        """
        handle = self._collection(tier)
        if self.find(tier, name) is not None or self.host.find_variable(handle.id, name):
            raise DuplicateTokenError(
                "Token already exists", TokenContext(tier=tier.value, name=name)
            )

        variable = self.host.create_variable(handle.id, name, value_type, group)
        for mode, value in initial_values.items():
            self.host.set_value(variable.id, handle.modes[mode.value], value)

        token = Token(
            id=variable.id,
            tier=tier,
            name=name,
            group=group,
            value_type=value_type,
            values_by_mode=dict(initial_values),
        )
        self._tier_cache(tier)[name] = token
        return token

    def set_value(self, token: Token, mode: Mode, value: Value) -> Token:
        """Write one mode's value and return the refreshed token."""
        handle = self._collection(token.tier)
        mode_id = handle.modes.get(mode.value)
        if mode_id is None:
            raise CollectionNotFoundError(
                f"Mode {mode} missing", TokenContext(tier=token.tier.value, name=token.name)
            )

        try:
            self.host.set_value(token.id, mode_id, value)
        except StoreError as e:
            raise type(e)(
                e.message, TokenContext(tier=token.tier.value, name=token.name, mode=mode.value)
            ) from e

        current = self.find(token.tier, token.name) or token
        updated = current.model_copy(
            update={"values_by_mode": {**current.values_by_mode, mode: value}}
        )
        self._tier_cache(token.tier)[token.name] = updated
        return updated

    def remove_all(self) -> None:
        """Remove every token from every tier and drop the lookup cache."""
        self.host.remove_all()
        self.invalidate()

    def commit(self) -> None:
        self.host.commit()
