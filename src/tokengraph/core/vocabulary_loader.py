"""
Vocabulary override loading.

A project may ship a ``vocabulary.yaml`` next to tokengraph.toml that
replaces or adds semantic roles and component properties:

    semantic:
      primary:
        light: primary-600
        dark: primary-400
        group: colors/primary
    components:
      button/ghost:
        foreground:
          light: mutedForeground
          dark: foreground

Entries are overlaid on the built-in vocabulary.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from tokengraph.tiers.vocabulary import DEFAULT_VOCABULARY, RoleSpec, Vocabulary

from .errors import VocabularyError

logger = logging.getLogger(__name__)


def _parse_role(raw: Any, where: str) -> RoleSpec:
    if isinstance(raw, str):
        return RoleSpec(light=raw, dark=raw)
    if not isinstance(raw, dict):
        raise VocabularyError(f"{where}: expected a reference or a light/dark mapping")
    if "light" in raw and "dark" not in raw:
        raw = {**raw, "dark": raw["light"]}
    return RoleSpec(**raw)


def parse_vocabulary_data(data: dict[str, Any]) -> Vocabulary:
    """Build a Vocabulary from raw YAML data.

    Roles may be a single reference string (same in both modes) or a
    mapping with ``light``, ``dark`` and optional ``group``.
    """
    unknown = set(data) - {"semantic", "components"}
    if unknown:
        raise VocabularyError(f"Unknown vocabulary sections: {', '.join(sorted(unknown))}")

    try:
        semantic = {
            name: _parse_role(raw, f"semantic.{name}")
            for name, raw in (data.get("semantic") or {}).items()
        }
        components: dict[str, dict[str, RoleSpec]] = {}
        for group, properties in (data.get("components") or {}).items():
            if not isinstance(properties, dict):
                raise VocabularyError(f"components.{group}: expected a property mapping")
            components[group] = {
                prop: _parse_role(raw, f"components.{group}.{prop}")
                for prop, raw in properties.items()
            }
        return Vocabulary(semantic=semantic, components=components)
    except ValidationError as e:
        raise VocabularyError(f"Invalid vocabulary entry: {e}") from e


def load_vocabulary(path: Path, *, base: Vocabulary = DEFAULT_VOCABULARY) -> Vocabulary:
    """Load overrides from ``path`` and overlay them on ``base``.

    A missing file returns ``base`` unchanged.

    Raises:
        VocabularyError: If the file is not valid YAML or has invalid entries.
    """
    if not path.exists():
        logger.debug(f"No {path.name} found, using built-in vocabulary")
        return base

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise VocabularyError(f"Invalid YAML in {path}: {e}") from e

    if not data:
        logger.warning(f"Empty vocabulary file at {path}, using built-in vocabulary")
        return base
    if not isinstance(data, dict):
        raise VocabularyError(f"Vocabulary file {path} must contain a mapping")

    overrides = parse_vocabulary_data(data)
    logger.info(
        f"Loaded {len(overrides.semantic)} semantic and "
        f"{sum(len(p) for p in overrides.components.values())} component overrides from {path}"
    )
    return base.merged(overrides)
