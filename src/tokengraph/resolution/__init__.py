"""
Cross-tier reference resolution.
"""

from .context import ResolutionContext
from .engine import ResolutionEngine
from .fallbacks import fallback_color
from .strategies import CYCLE_PAIRS, DEFAULT_STRATEGIES, SEMANTIC_KEYWORDS, Strategy

__all__ = [
    "CYCLE_PAIRS",
    "DEFAULT_STRATEGIES",
    "SEMANTIC_KEYWORDS",
    "ResolutionContext",
    "ResolutionEngine",
    "Strategy",
    "fallback_color",
]
