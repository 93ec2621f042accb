"""CLI commands for statusctl.

This package contains all subcommand implementations.
"""

from statusctl.cli.commands import init, listing, run

__all__ = ["init", "listing", "run"]
