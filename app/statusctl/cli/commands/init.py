"""Init command implementation.

Creates an empty config.toml to fill in by hand.
"""

from pathlib import Path
from typing import Annotated

import typer

from statusctl.core.config import ConfigError, config_exists, save_config
from statusctl.core.paths import get_config_path
from statusctl.models.config import StatusConfig
from statusctl.utils.formatting import print_error, print_info, print_success, print_warning

app = typer.Typer(
    help="Create an empty configuration file.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def init_config(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing configuration file.",
        ),
    ] = False,
) -> None:
    """Write an empty configuration file.

    Examples:
        statusctl init                         # Create ~/.config/statusctl/config.toml
        statusctl --config ./ws.toml init      # Create at a custom path
        statusctl init --force                 # Reset an existing file
    """
    if ctx.invoked_subcommand is not None:
        return

    obj = ctx.obj or {}
    output_path: Path = obj.get("config_path") or get_config_path()

    if config_exists(output_path):
        if not force:
            print_error(f"Config already exists: {output_path}")
            print_info("Use --force to overwrite it.")
            raise typer.Exit(code=1)
        print_warning(f"Overwriting existing config: {output_path}")

    try:
        saved_path = save_config(StatusConfig(), output_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config created: {saved_path}")
