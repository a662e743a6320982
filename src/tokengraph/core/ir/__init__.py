"""
tokengraph Intermediate Representation (IR) types.

All types are re-exported from this package.
"""

from .generation import (
    DEFAULT_PRIMARY_COLOR,
    GenerationRequest,
    GenerationResult,
    Resolution,
)
from .references import (
    REFERENCE_KEYWORDS,
    HexRef,
    KeywordRef,
    NamedRef,
    Reference,
    classify_reference,
)
from .tokens import (
    AliasValue,
    Color,
    LiteralValue,
    Mode,
    Tier,
    Token,
    TokenSpec,
    Value,
    ValueType,
)

__all__ = [
    # Tokens
    "AliasValue",
    "Color",
    "LiteralValue",
    "Mode",
    "Tier",
    "Token",
    "TokenSpec",
    "Value",
    "ValueType",
    # References
    "REFERENCE_KEYWORDS",
    "HexRef",
    "KeywordRef",
    "NamedRef",
    "Reference",
    "classify_reference",
    # Generation
    "DEFAULT_PRIMARY_COLOR",
    "GenerationRequest",
    "GenerationResult",
    "Resolution",
]
