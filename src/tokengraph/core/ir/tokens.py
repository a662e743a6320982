"""
Token graph IR types.

A token lives in exactly one tier and carries one value per mode. Values
are either literals (colors, numbers, strings) or aliases pointing at
another token by its host-issued id.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Enums
# =============================================================================


class Tier(StrEnum):
    """Abstraction level of a token. Primitive is the terminal tier."""

    PRIMITIVE = "primitive"
    SEMANTIC = "semantic"
    COMPONENT = "component"

    @property
    def rank(self) -> int:
        return _TIER_ORDER.index(self)

    @property
    def collection_name(self) -> str:
        """Host collection name for this tier."""
        return _COLLECTION_NAMES[self]

    def below(self) -> list[Tier]:
        """Tiers this tier may alias into, nearest first."""
        return [tier for tier in reversed(_TIER_ORDER) if tier.rank < self.rank]


_TIER_ORDER = [Tier.PRIMITIVE, Tier.SEMANTIC, Tier.COMPONENT]

_COLLECTION_NAMES = {
    Tier.PRIMITIVE: "Design System/Primitives",
    Tier.SEMANTIC: "Design System/Semantic",
    Tier.COMPONENT: "Design System/Components",
}


class Mode(StrEnum):
    """Appearance mode. Host mode names are exactly these values."""

    LIGHT = "Light"
    DARK = "Dark"


class ValueType(StrEnum):
    """Host variable type."""

    COLOR = "COLOR"
    FLOAT = "FLOAT"
    STRING = "STRING"


# =============================================================================
# Values
# =============================================================================


class Color(BaseModel):
    """RGBA color with channels in [0, 1]."""

    model_config = ConfigDict(frozen=True)

    r: float = Field(ge=0.0, le=1.0)
    g: float = Field(ge=0.0, le=1.0)
    b: float = Field(ge=0.0, le=1.0)
    a: float = Field(default=1.0, ge=0.0, le=1.0)


class LiteralValue(BaseModel):
    """A concrete value stored directly on the token."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["literal"] = "literal"
    value: Color | float | str


class AliasValue(BaseModel):
    """A reference to another token, resolved by the host at read time."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["alias"] = "alias"
    token_id: str = Field(description="Host id of the aliased token")


Value = Annotated[LiteralValue | AliasValue, Field(discriminator="kind")]


# =============================================================================
# Tokens
# =============================================================================


class Token(BaseModel):
    """A named, mode-dependent design token."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Opaque host-issued identifier")
    tier: Tier
    name: str = Field(description="Unique within its tier")
    group: str = Field(default="", description="Slash-separated organisation path")
    value_type: ValueType = ValueType.COLOR
    values_by_mode: dict[Mode, Value] = Field(default_factory=dict)

    def value_for(self, mode: Mode) -> LiteralValue | AliasValue | None:
        return self.values_by_mode.get(mode)

    def alias_target(self, mode: Mode) -> str | None:
        """Id of the aliased token in ``mode``, or None for literals."""
        value = self.values_by_mode.get(mode)
        if isinstance(value, AliasValue):
            return value.token_id
        return None


class TokenSpec(BaseModel):
    """A token a tier builder wants to exist, with its reference per mode."""

    model_config = ConfigDict(frozen=True)

    name: str
    group: str = ""
    value_type: ValueType = ValueType.COLOR
    references: dict[Mode, str] = Field(default_factory=dict)
