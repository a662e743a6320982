"""
Generation request/result and resolution outcome types.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .tokens import Tier, Value

DEFAULT_PRIMARY_COLOR = "#3B82F6"


class GenerationRequest(BaseModel):
    """Parameters for one generation pass."""

    model_config = ConfigDict(frozen=True)

    primary_color: str = Field(
        default=DEFAULT_PRIMARY_COLOR, description="Brand color the primary palette is built from"
    )
    clear_existing: bool = Field(
        default=False, description="Remove every existing token before building"
    )
    grayscales: list[str] = Field(
        default_factory=lambda: ["gray", "slate", "zinc", "neutral", "stone"],
        description="Grayscale families to emit as primitives",
    )


class GenerationResult(BaseModel):
    """Outcome of a generation pass."""

    model_config = ConfigDict(frozen=True)

    success: bool
    message: str
    counts: dict[Tier, int] = Field(default_factory=dict)


class Resolution(BaseModel):
    """An engine outcome together with the strategy that produced it."""

    model_config = ConfigDict(frozen=True)

    value: Value
    strategy: str
    matched_name: str | None = None
    matched_tier: Tier | None = None

    @property
    def is_alias(self) -> bool:
        return self.value.kind == "alias"
