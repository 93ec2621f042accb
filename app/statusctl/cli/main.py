"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from statusctl import __version__
from statusctl.cli.commands import init, listing, run
from statusctl.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="statusctl",
    help="Keep track of the working-tree status of your Git repositories.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"statusctl version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route statusctl log records to stderr through Rich.

    Args:
        verbose: Log at DEBUG level instead of WARNING.
    """
    package_logger = logging.getLogger("statusctl")
    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)
    package_logger.addHandler(RichHandler(console=err_console, show_time=False, show_path=False))
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging on stderr.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            envvar="STATUSCTL_CONFIG",
            help="Configuration file (default: ~/.config/statusctl/config.toml).",
        ),
    ] = None,
) -> None:
    """statusctl - Keep track of your Git repositories.

    The configuration file lists *collections* (directories whose immediate
    subdirectories are repositories) and individual *repositories*.
    """
    configure_logging(verbose)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config_path


# Register commands
app.add_typer(run.app, name="run")
app.add_typer(listing.app, name="list")
app.add_typer(init.app, name="init")


if __name__ == "__main__":
    app()
