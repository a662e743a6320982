"""
Token storage: the host boundary and the tier-aware token store.
"""

from .host import CollectionHandle, HostVariable, InMemoryHost, JsonFileHost, VariableHost
from .token_store import MODES, TokenStore

__all__ = [
    "MODES",
    "CollectionHandle",
    "HostVariable",
    "InMemoryHost",
    "JsonFileHost",
    "TokenStore",
    "VariableHost",
]
