"""
Naming convention helpers.

Vocabularies mix camelCase (``primaryForeground``) and kebab-case
(``primary-foreground``). These helpers produce candidate spellings for
lookups; stored token names are never rewritten.
"""

from __future__ import annotations

import re

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_KEBAB_SEGMENT = re.compile(r"-([a-z0-9])")


def to_kebab(name: str) -> str:
    """``primaryForeground`` -> ``primary-foreground``."""
    return _CAMEL_BOUNDARY.sub(r"\1-\2", name).lower()


def to_camel(name: str) -> str:
    """``primary-foreground`` -> ``primaryForeground``."""
    return _KEBAB_SEGMENT.sub(lambda m: m.group(1).upper(), name)


def case_variants(name: str) -> list[str]:
    """Kebab and camel spellings of ``name`` that differ from it."""
    variants: list[str] = []
    for candidate in (to_kebab(name), to_camel(name)):
        if candidate and candidate != name and candidate not in variants:
            variants.append(candidate)
    return variants


def split_prefix_suffix(name: str) -> tuple[str, str] | None:
    """Split on the last ``-``; None when there is no usable separator."""
    prefix, sep, suffix = name.rpartition("-")
    if not sep or not prefix or not suffix:
        return None
    return prefix, suffix
