"""Shared Rich display functions for scan reports and configuration.

Report lines use fixed-width outcome labels so paths line up in a single
column. Lines are printed without wrapping so long paths stay intact.
"""

from rich.markup import escape

from statusctl.models.config import StatusConfig
from statusctl.models.status import (
    CandidatePath,
    OutcomeKind,
    Section,
    SectionReport,
    StatusOutcome,
)
from statusctl.utils.formatting import console


def format_outcome_line(candidate: CandidatePath, outcome: StatusOutcome) -> str:
    """Format one report line with Rich markup.

    UNKNOWN lines carry the error detail after the path.

    Args:
        candidate: The inspected path.
        outcome: Its classification.

    Returns:
        Markup string: two-space indent, styled label, path, optional detail.
    """
    line = f"  [outcome.{outcome.kind.value}]{outcome.label}[/]{escape(candidate.path)}"
    if outcome.kind == OutcomeKind.UNEXPECTED:
        line += f": {escape(outcome.detail or '')}"
    return line


def print_section_header(section: Section) -> None:
    """Print a blank line followed by the section header."""
    console.print()
    console.print(f"[header]{section.value}:[/]", soft_wrap=True)


def print_section_report(report: SectionReport) -> None:
    """Print a section header and its outcome lines in submission order."""
    print_section_header(report.section)
    for candidate, outcome in report.entries:
        console.print(format_outcome_line(candidate, outcome), soft_wrap=True)


def print_config_listing(config: StatusConfig) -> None:
    """Echo the raw configuration entries under the report section headers."""
    print_section_header(Section.COLLECTIONS)
    for collection in config.collections:
        console.print(f"  {escape(collection)}", soft_wrap=True)
    print_section_header(Section.REPOSITORIES)
    for repository in config.repositories:
        console.print(f"  {escape(repository)}", soft_wrap=True)
    console.print()
