"""List command implementation.

Echoes the configured collections and repositories without scanning.
"""

from pathlib import Path

import typer

from statusctl.cli.display import print_config_listing
from statusctl.core.config import require_config

app = typer.Typer(
    help="List the contents of the configuration file.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def list_config(ctx: typer.Context) -> None:
    """Show configured collections and repositories as written."""
    if ctx.invoked_subcommand is not None:
        return

    obj = ctx.obj or {}
    config_path: Path | None = obj.get("config_path")
    print_config_listing(require_config(config_path))
