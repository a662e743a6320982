"""
Host variable store boundary.

A host owns collections (one per tier), each with named modes, and the
variables inside them. Identifiers are opaque strings issued by the host.
Two hosts ship with tokengraph: an in-memory host used by tests and
library callers, and a JSON-file host the CLI uses to keep a store
between runs.
"""

from __future__ import annotations

import json
import logging
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from pydantic import TypeAdapter, ValidationError

from tokengraph.core.errors import CollectionNotFoundError, StoreError
from tokengraph.core.ir import Value, ValueType

logger = logging.getLogger(__name__)

_VALUE_ADAPTER: TypeAdapter[Any] = TypeAdapter(Value)


@dataclass
class CollectionHandle:
    """A host collection and its mode ids keyed by mode name."""

    id: str
    name: str
    modes: dict[str, str] = field(default_factory=dict)


@dataclass
class HostVariable:
    """A variable as the host stores it. Values are keyed by mode id."""

    id: str
    name: str
    collection_id: str
    value_type: ValueType
    group: str = ""
    values: dict[str, Any] = field(default_factory=dict)


class VariableHost(Protocol):
    """Operations tokengraph needs from a variable store."""

    def ensure_collection(self, name: str, modes: list[str]) -> CollectionHandle:
        """Find or create a collection that has every mode in ``modes``."""
        ...

    def find_variable(self, collection_id: str, name: str) -> HostVariable | None: ...

    def list_variables(self, collection_id: str) -> list[HostVariable]: ...

    def create_variable(
        self, collection_id: str, name: str, value_type: ValueType, group: str = ""
    ) -> HostVariable: ...

    def set_value(self, variable_id: str, mode_id: str, value: Any) -> None: ...

    def remove_all(self) -> None:
        """Remove every variable from every collection."""
        ...

    def commit(self) -> None:
        """Persist pending changes, where the host has somewhere to persist them."""
        ...


def _new_id(prefix: str) -> str:
    return f"{prefix}:{uuid.uuid4().hex[:12]}"


# =============================================================================
# In-memory host
# =============================================================================


class InMemoryHost:
    """Dictionary-backed host. Preserves insertion order of variables."""

    def __init__(self) -> None:
        self.collections: dict[str, CollectionHandle] = {}
        self.variables: dict[str, HostVariable] = {}

    def ensure_collection(self, name: str, modes: list[str]) -> CollectionHandle:
        handle = next((c for c in self.collections.values() if c.name == name), None)
        if handle is None:
            handle = CollectionHandle(id=_new_id("VariableCollectionId"), name=name)
            self.collections[handle.id] = handle
            logger.debug(f"Created collection {name}")

        for mode in modes:
            if mode not in handle.modes:
                handle.modes[mode] = _new_id("ModeId")
        return handle

    def _require_collection(self, collection_id: str) -> CollectionHandle:
        handle = self.collections.get(collection_id)
        if handle is None:
            raise CollectionNotFoundError(f"Unknown collection id {collection_id}")
        return handle

    def find_variable(self, collection_id: str, name: str) -> HostVariable | None:
        self._require_collection(collection_id)
        for variable in self.variables.values():
            if variable.collection_id == collection_id and variable.name == name:
                return variable
        return None

    def list_variables(self, collection_id: str) -> list[HostVariable]:
        self._require_collection(collection_id)
        return [v for v in self.variables.values() if v.collection_id == collection_id]

    def create_variable(
        self, collection_id: str, name: str, value_type: ValueType, group: str = ""
    ) -> HostVariable:
        self._require_collection(collection_id)
        variable = HostVariable(
            id=_new_id("VariableID"),
            name=name,
            collection_id=collection_id,
            value_type=value_type,
            group=group,
        )
        self.variables[variable.id] = variable
        return variable

    def set_value(self, variable_id: str, mode_id: str, value: Any) -> None:
        variable = self.variables.get(variable_id)
        if variable is None:
            raise StoreError(f"Unknown variable id {variable_id}")
        handle = self._require_collection(variable.collection_id)
        if mode_id not in handle.modes.values():
            raise StoreError(f"Mode {mode_id} not in collection {handle.name}")
        variable.values[mode_id] = value

    def remove_all(self) -> None:
        count = len(self.variables)
        self.variables.clear()
        logger.info(f"Removed {count} variables")

    def commit(self) -> None:
        pass


# =============================================================================
# JSON file host
# =============================================================================


class JsonFileHost(InMemoryHost):
    """In-memory host that loads from and commits to a JSON document."""

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = path
        if path.exists():
            self._load()

    def _load(self) -> None:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            for raw in data.get("collections", []):
                handle = CollectionHandle(id=raw["id"], name=raw["name"], modes=raw["modes"])
                self.collections[handle.id] = handle
            for raw in data.get("variables", []):
                variable = HostVariable(
                    id=raw["id"],
                    name=raw["name"],
                    collection_id=raw["collection_id"],
                    value_type=ValueType(raw["value_type"]),
                    group=raw.get("group", ""),
                    values={
                        mode_id: _VALUE_ADAPTER.validate_python(value)
                        for mode_id, value in raw.get("values", {}).items()
                    },
                )
                self.variables[variable.id] = variable
        except (json.JSONDecodeError, KeyError, ValueError, ValidationError) as e:
            raise StoreError(f"Corrupt token store {self.path}: {e}") from e

        logger.debug(f"Loaded {len(self.variables)} variables from {self.path}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "collections": [
                {"id": c.id, "name": c.name, "modes": c.modes} for c in self.collections.values()
            ],
            "variables": [
                {
                    "id": v.id,
                    "name": v.name,
                    "collection_id": v.collection_id,
                    "value_type": v.value_type.value,
                    "group": v.group,
                    "values": {
                        mode_id: _VALUE_ADAPTER.dump_python(value, mode="json")
                        for mode_id, value in v.values.items()
                    },
                }
                for v in self.variables.values()
            ],
        }

    def commit(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        logger.info(f"Committed {len(self.variables)} variables to {self.path}")
