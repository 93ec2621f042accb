"""CLI package for statusctl.

This package contains the Typer application and all subcommands.
"""

from statusctl.cli.main import app

__all__ = ["app"]
