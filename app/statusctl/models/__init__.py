"""Data models for statusctl.

This module exports the core data structures used throughout the application.
"""

from statusctl.models.config import StatusConfig
from statusctl.models.status import (
    CandidatePath,
    OutcomeKind,
    ScanMetadata,
    ScanReport,
    ScanSection,
    Section,
    SectionReport,
    StatusOutcome,
)

__all__ = [
    "CandidatePath",
    "OutcomeKind",
    "ScanMetadata",
    "ScanReport",
    "ScanSection",
    "Section",
    "SectionReport",
    "StatusConfig",
    "StatusOutcome",
]
