"""
Tier builders and the generation pipeline.
"""

from .base import TierBuilder
from .component import ComponentBuilder
from .pipeline import generate_design_system
from .primitive import PrimitiveBuilder
from .semantic import SemanticBuilder
from .vocabulary import (
    COMPONENT_GROUPS,
    DEFAULT_VOCABULARY,
    SEMANTIC_ROLES,
    RoleSpec,
    Vocabulary,
)

__all__ = [
    "COMPONENT_GROUPS",
    "DEFAULT_VOCABULARY",
    "SEMANTIC_ROLES",
    "ComponentBuilder",
    "PrimitiveBuilder",
    "RoleSpec",
    "SemanticBuilder",
    "TierBuilder",
    "Vocabulary",
    "generate_design_system",
]
