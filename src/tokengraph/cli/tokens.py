"""
Token store commands: generate, inspect, resolve, clear.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.table import Table

from tokengraph.core.color import color_to_hex
from tokengraph.core.errors import VocabularyError
from tokengraph.core.ir import AliasValue, Color, LiteralValue, Mode, Tier, Token, Value
from tokengraph.core.manifest import ProjectManifest
from tokengraph.core.vocabulary_loader import load_vocabulary
from tokengraph.resolution import ResolutionEngine
from tokengraph.store import TokenStore
from tokengraph.tiers import generate_design_system

from .utils import open_store

console = Console()

StoreOption = Annotated[
    Path | None,
    typer.Option("--store", "-s", help="Token store file (defaults to the [store] path)"),
]


def _describe(value: Value | None, store: TokenStore) -> str:
    if isinstance(value, AliasValue):
        target = store.get_by_id(value.token_id)
        return f"-> {target.tier}/{target.name}" if target else f"-> {value.token_id} (missing)"
    if isinstance(value, LiteralValue):
        literal = value.value
        if isinstance(literal, Color):
            return color_to_hex(literal)
        if isinstance(literal, float):
            return f"{literal:g}"
        return str(literal)
    return "-"


def _token_to_dict(token: Token, store: TokenStore) -> dict[str, Any]:
    return {
        "id": token.id,
        "tier": token.tier.value,
        "name": token.name,
        "group": token.group,
        "type": token.value_type.value,
        "values": {mode.value: _describe(token.value_for(mode), store) for mode in Mode},
    }


# =============================================================================
# Commands
# =============================================================================


def generate(
    ctx: typer.Context,
    primary: Annotated[
        str | None, typer.Option("--primary", "-p", help="Primary brand color (hex)")
    ] = None,
    clear: Annotated[
        bool | None,
        typer.Option("--clear/--no-clear", help="Remove existing tokens before generating"),
    ] = None,
    store_path: StoreOption = None,
) -> None:
    """Create or update the three-tier design token graph."""
    manifest: ProjectManifest = ctx.obj

    try:
        vocabulary = load_vocabulary(manifest.vocabulary_path)
    except VocabularyError as e:
        typer.secho(f"Vocabulary error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    store = open_store(manifest, store_path)
    request = manifest.generation.to_request(primary_color=primary, clear_existing=clear)
    result = generate_design_system(store, request, vocabulary)

    if not result.success:
        typer.secho(result.message, fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    table = Table(title="Generated tokens")
    table.add_column("Tier", style="cyan")
    table.add_column("Tokens", justify="right")
    for tier, count in result.counts.items():
        table.add_row(tier.value, str(count))
    console.print(table)
    typer.secho(result.message, fg=typer.colors.GREEN)


def inspect(
    ctx: typer.Context,
    tier: Annotated[Tier | None, typer.Option("--tier", "-t", help="Only show one tier")] = None,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    store_path: StoreOption = None,
) -> None:
    """List tokens with their Light and Dark values."""
    store = open_store(ctx.obj, store_path, must_exist=True)
    tiers = [tier] if tier else list(Tier)
    tokens = [token for t in tiers for token in store.tokens(t)]

    if output_json:
        typer.echo(json.dumps([_token_to_dict(t, store) for t in tokens], indent=2))
        return

    table = Table(title=f"{len(tokens)} tokens")
    table.add_column("Tier", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Group", style="dim")
    table.add_column("Light")
    table.add_column("Dark")
    for token in tokens:
        table.add_row(
            token.tier.value,
            token.name,
            token.group,
            _describe(token.value_for(Mode.LIGHT), store),
            _describe(token.value_for(Mode.DARK), store),
        )
    console.print(table)


def resolve(
    ctx: typer.Context,
    tier: Annotated[Tier, typer.Argument(help="Tier of the token being resolved")],
    name: Annotated[str, typer.Argument(help="Target token name")],
    reference: Annotated[str, typer.Argument(help="Reference to resolve")],
    mode: Annotated[Mode, typer.Option("--mode", "-m", help="Mode to resolve in")] = Mode.LIGHT,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    store_path: StoreOption = None,
) -> None:
    """Explain how a reference resolves against the current store (read-only)."""
    store = open_store(ctx.obj, store_path, must_exist=True)
    resolution = ResolutionEngine(store).explain(tier, name, reference, mode)

    payload = {
        "strategy": resolution.strategy,
        "value": _describe(resolution.value, store),
        "alias": resolution.is_alias,
    }
    if output_json:
        typer.echo(json.dumps(payload, indent=2))
        return

    typer.echo(f"{tier}/{name} [{mode}] <- {reference!r}")
    typer.echo(f"  strategy: {payload['strategy']}")
    typer.echo(f"  value:    {payload['value']}")


def clear(
    ctx: typer.Context,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
    store_path: StoreOption = None,
) -> None:
    """Remove every token from every tier."""
    store = open_store(ctx.obj, store_path, must_exist=True)
    total = sum(store.count(t) for t in Tier)

    if not yes and not typer.confirm(f"Remove {total} tokens?"):
        raise typer.Exit()

    store.remove_all()
    store.commit()
    typer.secho(f"Removed {total} tokens", fg=typer.colors.GREEN)
