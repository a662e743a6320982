"""
Design system generation pipeline.

Initializes the tier collections, optionally clears existing tokens, and
builds the primitive, semantic and component tiers in that order. Host
failures are logged and reported in the result rather than raised, so
callers always get a ``GenerationResult``.
"""

from __future__ import annotations

import logging

from tokengraph.core.errors import StoreError
from tokengraph.core.ir import GenerationRequest, GenerationResult, Tier
from tokengraph.resolution import ResolutionEngine
from tokengraph.store import TokenStore

from .component import ComponentBuilder
from .primitive import PrimitiveBuilder
from .semantic import SemanticBuilder
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary

logger = logging.getLogger(__name__)


def generate_design_system(
    store: TokenStore,
    request: GenerationRequest | None = None,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> GenerationResult:
    """Create or update every token of the design system.

    Args:
        store: Token store over the target host.
        request: Primary color and options; defaults apply when omitted.
        vocabulary: Semantic and component vocabulary.

    Returns:
        GenerationResult with per-tier token counts on success.
    """
    request = request or GenerationRequest()
    logger.info(f"Generating design system from primary color {request.primary_color}")

    try:
        store.init()
    except StoreError as e:
        logger.error(f"Failed to initialize collections: {e}")
        return GenerationResult(success=False, message=f"Failed to initialize collections: {e}")

    try:
        if request.clear_existing:
            logger.info("Clearing existing tokens")
            store.remove_all()

        engine = ResolutionEngine(store)
        counts = {
            Tier.PRIMITIVE: PrimitiveBuilder(store, request, engine).build(),
            Tier.SEMANTIC: SemanticBuilder(store, vocabulary, engine).build(),
            Tier.COMPONENT: ComponentBuilder(store, vocabulary, engine).build(),
        }
        store.commit()
    except StoreError as e:
        logger.error(f"Design system generation failed: {e}")
        return GenerationResult(success=False, message=f"Error: {e}")

    return GenerationResult(
        success=True,
        message="Design system tokens created in separate tier collections",
        counts=counts,
    )
