"""Shared pytest fixtures for tokengraph tests."""

from pathlib import Path

import pytest

from tokengraph.core.color import hex_to_color
from tokengraph.core.ir import GenerationRequest, LiteralValue, Mode, Tier, Token, Value
from tokengraph.store import InMemoryHost, TokenStore
from tokengraph.tiers import generate_design_system


@pytest.fixture
def host() -> InMemoryHost:
    return InMemoryHost()


@pytest.fixture
def store(host: InMemoryHost) -> TokenStore:
    """An initialized, empty token store."""
    store = TokenStore(host)
    store.init()
    return store


@pytest.fixture
def generated_store(store: TokenStore) -> TokenStore:
    """A store holding a full default design system."""
    result = generate_design_system(store, GenerationRequest(primary_color="#3B82F6"))
    assert result.success, result.message
    return store


@pytest.fixture
def add_token(store: TokenStore):
    """Create a token with the same value in both modes."""

    def _add(tier: Tier, name: str, value: Value | str = "#808080") -> Token:
        if isinstance(value, str):
            value = LiteralValue(value=hex_to_color(value))
        return store.create(tier, name, {Mode.LIGHT: value, Mode.DARK: value})

    return _add


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A project directory with a minimal tokengraph.toml."""
    (tmp_path / "tokengraph.toml").write_text(
        '[project]\nname = "test"\n\n[store]\npath = "store.json"\n', encoding="utf-8"
    )
    return tmp_path
