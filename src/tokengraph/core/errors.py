"""
Error types for tokengraph storage, configuration and generation.
"""

from dataclasses import dataclass
from typing import Optional


class TokenGraphError(Exception):
    """Base exception for all tokengraph errors."""

    def __init__(self, message: str, context: Optional["TokenContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class StoreError(TokenGraphError):
    """
    Raised when the host variable store rejects an operation.

    Examples:
    - Collection cannot be created or found
    - Variable creation rejected
    - Value write to an unknown variable or mode
    """

    pass


class CollectionNotFoundError(StoreError):
    """Raised when a tier collection or one of its modes is missing."""

    pass


class DuplicateTokenError(StoreError):
    """Raised when a token is created under a name already used in its tier."""

    pass


class ManifestError(TokenGraphError):
    """Raised when tokengraph.toml cannot be read or has invalid values."""

    pass


class VocabularyError(TokenGraphError):
    """
    Raised when a vocabulary override file is invalid.

    Examples:
    - Malformed YAML
    - Unknown component group
    - Role missing a Light or Dark reference
    """

    pass


@dataclass
class TokenContext:
    """
    Location of an error inside the token graph.

    Attributes:
        tier: Tier name (primitive, semantic, component)
        name: Token name within the tier
        mode: Optional mode name (Light or Dark)
    """

    tier: str
    name: str | None = None
    mode: str | None = None

    def format(self) -> str:
        """
        Format context as a short path.

        Returns:
            String like "semantic/foreground[Dark]"
        """
        location = self.tier
        if self.name:
            location += f"/{self.name}"
        if self.mode:
            location += f"[{self.mode}]"
        return location
