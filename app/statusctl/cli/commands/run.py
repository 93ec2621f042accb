"""Run command implementation.

Reports the working-tree status of every configured repository.
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from statusctl.cli.display import print_section_report
from statusctl.core.config import require_config
from statusctl.scanner.coordinator import ScanCoordinator
from statusctl.scanner.expander import CollectionError, build_scan_plan
from statusctl.scanner.inspector import StatusInspector
from statusctl.utils.formatting import console, print_error

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Report working-tree status for all collections and repositories.",
    invoke_without_command=True,
)


class OutputFormat(str, Enum):
    """Output format options."""

    TEXT = "text"
    JSON = "json"


@app.callback(invoke_without_command=True)
def run_scan(
    ctx: typer.Context,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: text or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TEXT,
    jobs: Annotated[
        int | None,
        typer.Option(
            "--jobs",
            "-j",
            min=1,
            help="Maximum concurrent inspections (default: one per repository).",
        ),
    ] = None,
) -> None:
    """Check Git status for all collections and repositories.

    Every immediate subdirectory of each collection is inspected, followed
    by each standalone repository. Results are listed in configuration
    order.

    Examples:
        statusctl run                  # Text report
        statusctl run --format json    # Machine-readable report
        statusctl run --jobs 8         # At most 8 concurrent git calls
    """
    if ctx.invoked_subcommand is not None:
        return

    obj = ctx.obj or {}
    config_path: Path | None = obj.get("config_path")
    config = require_config(config_path)
    if config.is_empty:
        logger.info("No collections or repositories configured")

    try:
        plan = build_scan_plan(config)
    except CollectionError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    inspector = StatusInspector()
    if sum(len(section) for section in plan) and not inspector.is_available():
        print_error("git is not available on PATH.")
        raise typer.Exit(code=1)

    coordinator = ScanCoordinator(inspector, max_workers=jobs or config.max_workers)

    if output_format == OutputFormat.JSON:
        report = coordinator.scan(plan)
        console.print_json(json.dumps(report.to_dict()))
        return

    # Each section is printed as soon as all of its inspections are done
    for section in plan:
        print_section_report(coordinator.scan_section(section))
    console.print()
