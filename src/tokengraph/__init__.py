"""
tokengraph: three-tier design token generation with cross-tier reference resolution.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("tokengraph")
except PackageNotFoundError:
    __version__ = "0.1.0"

from tokengraph.core.errors import (  # noqa: E402
    CollectionNotFoundError,
    DuplicateTokenError,
    ManifestError,
    StoreError,
    TokenGraphError,
    VocabularyError,
)

__all__ = [
    "__version__",
    "CollectionNotFoundError",
    "DuplicateTokenError",
    "ManifestError",
    "StoreError",
    "TokenGraphError",
    "VocabularyError",
]
