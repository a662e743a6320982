"""
Reference IR types.

Tier vocabularies emit plain strings. They are classified exactly once,
at the builder boundary, into named, color-literal or keyword references
so the resolution engine never re-sniffs the text.
"""

from __future__ import annotations

import re
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

# Keywords that name a literal but may also match a token of the same name
REFERENCE_KEYWORDS = frozenset({"transparent", "white", "black"})

_COLOR_LITERAL_RE = re.compile(r"^(#[0-9a-fA-F]{3,8}|rgba?\(.*\))$", re.IGNORECASE)


class NamedRef(BaseModel):
    """Symbolic token name in any naming convention."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["named"] = "named"
    name: str

    @property
    def text(self) -> str:
        return self.name


class HexRef(BaseModel):
    """Color literal in hex or rgb()/rgba() notation."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["hex"] = "hex"
    literal: str

    @property
    def text(self) -> str:
        return self.literal


class KeywordRef(BaseModel):
    """Keyword such as ``transparent`` or ``white``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["keyword"] = "keyword"
    keyword: str

    @property
    def text(self) -> str:
        return self.keyword


Reference = Annotated[NamedRef | HexRef | KeywordRef, Field(discriminator="kind")]


def classify_reference(text: str) -> NamedRef | HexRef | KeywordRef:
    """Classify a raw reference string.

    Surrounding whitespace is stripped. Empty input becomes an empty
    NamedRef, which the engine resolves through its fallback.
    """
    stripped = (text or "").strip()
    if _COLOR_LITERAL_RE.match(stripped):
        return HexRef(literal=stripped)
    if stripped.lower() in REFERENCE_KEYWORDS:
        return KeywordRef(keyword=stripped.lower())
    return NamedRef(name=stripped)
