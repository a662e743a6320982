"""
tokengraph CLI utilities.

Shared helpers used across CLI modules: version display, logging setup,
and opening the project's token store.
"""

from __future__ import annotations

import logging
import platform
from pathlib import Path

import typer

from tokengraph import __version__
from tokengraph.core.errors import StoreError
from tokengraph.core.manifest import LOG_LEVELS, ProjectManifest
from tokengraph.store import JsonFileHost, TokenStore

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"tokengraph {__version__}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    level = level.upper()
    if level not in LOG_LEVELS:
        typer.secho(
            f"Unknown log level {level!r}, using WARNING", fg=typer.colors.YELLOW, err=True
        )
        level = "WARNING"
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT)
    logging.getLogger("tokengraph").setLevel(getattr(logging, level))


def open_store(
    manifest: ProjectManifest, store_path: Path | None = None, *, must_exist: bool = False
) -> TokenStore:
    """Open the JSON-backed token store named by the manifest.

    Exits with code 1 when the store is missing (and required) or unreadable.
    """
    path = store_path or manifest.store_path
    if must_exist and not path.exists():
        typer.secho(
            f"No token store at {path}. Run 'tokengraph generate' first.",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        store = TokenStore(JsonFileHost(path))
        store.init()
    except StoreError as e:
        typer.secho(f"Cannot open token store: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e
    return store
