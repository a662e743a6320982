"""
tokengraph CLI package.

- tokens.py: generate, inspect, resolve and clear commands
- export.py: css / tailwind / dtcg exporters
- utils.py: shared helpers (version, logging, store access)
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

from tokengraph import __version__
from tokengraph.core.errors import ManifestError
from tokengraph.core.manifest import MANIFEST_FILE, load_manifest

from .export import export_app
from .tokens import clear, generate, inspect, resolve
from .utils import configure_logging, version_callback

app = typer.Typer(
    help="Generate, inspect and export a three-tier design token graph.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    manifest: Annotated[
        Path,
        typer.Option("--manifest", help="Path to tokengraph.toml"),
    ] = Path(MANIFEST_FILE),
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            envvar="TOKENGRAPH_LOG_LEVEL",
            help="DEBUG, INFO, WARNING or ERROR (defaults to the manifest's [logging] level)",
        ),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and environment information",
        ),
    ] = None,
) -> None:
    """tokengraph CLI main callback for global options."""
    try:
        project = load_manifest(manifest)
    except ManifestError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    configure_logging(log_level or project.logging.level)
    ctx.obj = project


app.command(name="generate")(generate)
app.command(name="inspect")(inspect)
app.command(name="resolve")(resolve)
app.command(name="clear")(clear)
app.add_typer(export_app, name="export")


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = [
    "__version__",
    "app",
    "main",
    "export_app",
]

if __name__ == "__main__":
    main(sys.argv[1:])
