"""
Export commands: render the token store as CSS, Tailwind config or DTCG JSON.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer

from tokengraph.export import export_css_file, export_dtcg_file, export_tailwind_file
from tokengraph.store import TokenStore

from .utils import open_store

export_app = typer.Typer(
    help="Export tokens for downstream tooling",
    no_args_is_help=True,
)

OutputOption = Annotated[
    Path | None,
    typer.Option("--output", "-o", help="Output file (defaults to the manifest's [export] path)"),
]
StoreOption = Annotated[Path | None, typer.Option("--store", "-s", help="Token store file")]


def _run_export(
    ctx: typer.Context,
    writer: Callable[[TokenStore, Path], Path],
    output: Path | None,
    default: str,
    store_path: Path | None,
) -> None:
    manifest = ctx.obj
    store = open_store(manifest, store_path, must_exist=True)
    written = writer(store, output or manifest.resolve_path(default))
    typer.secho(f"Wrote {written}", fg=typer.colors.GREEN)


@export_app.command(name="css")
def export_css(
    ctx: typer.Context, output: OutputOption = None, store_path: StoreOption = None
) -> None:
    """CSS custom properties with a .dark block."""
    _run_export(ctx, export_css_file, output, ctx.obj.export.css, store_path)


@export_app.command(name="tailwind")
def export_tailwind(
    ctx: typer.Context, output: OutputOption = None, store_path: StoreOption = None
) -> None:
    """tailwind.config.js pointing at the CSS variables."""
    _run_export(ctx, export_tailwind_file, output, ctx.obj.export.tailwind, store_path)


@export_app.command(name="dtcg")
def export_dtcg(
    ctx: typer.Context, output: OutputOption = None, store_path: StoreOption = None
) -> None:
    """W3C DTCG tokens.json."""
    _run_export(ctx, export_dtcg_file, output, ctx.obj.export.dtcg, store_path)
