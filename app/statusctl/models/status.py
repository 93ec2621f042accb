"""Status models for repository scanning.

This module defines the data structures flowing through a scan: the
candidate paths produced by expansion, the outcome attached to each one,
and the per-section and whole-scan reports built from them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any


class Section(str, Enum):
    """Configuration section a candidate path came from.

    Declaration order is report order: collections first.
    """

    COLLECTIONS = "collections"
    REPOSITORIES = "repositories"


class OutcomeKind(str, Enum):
    """Classification of a single repository inspection.

    Attributes:
        CLEAN: Nothing to commit and nothing untracked.
        UNCLEAN: Modified, staged, deleted or untracked paths present.
        REPOSITORY_ERROR: Path is missing or is not a repository root.
        UNEXPECTED: Anything else went wrong; carries the error detail.
    """

    CLEAN = "clean"
    UNCLEAN = "unclean"
    REPOSITORY_ERROR = "error"
    UNEXPECTED = "unknown"

    @property
    def label(self) -> str:
        """Fixed-width report label (nine characters)."""
        return _LABELS[self]


_LABELS: dict[OutcomeKind, str] = {
    OutcomeKind.CLEAN: "CLEAN    ",
    OutcomeKind.UNCLEAN: "UNCLEAN  ",
    OutcomeKind.REPOSITORY_ERROR: "ERROR    ",
    OutcomeKind.UNEXPECTED: "UNKNOWN  ",
}


@dataclass(frozen=True, slots=True)
class CandidatePath:
    """A path submitted for inspection.

    Attributes:
        path: Absolute filesystem path (raw configured path if it could not
            be made absolute).
        section: Section the path belongs to.
        name: Basename, used for ordering collection members.
        collection: Source collection directory, None for standalone repositories.
    """

    path: str
    section: Section
    name: str
    collection: str | None = None

    def __post_init__(self) -> None:
        """Validate candidate data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class StatusOutcome:
    """Result of inspecting one candidate path.

    Only UNEXPECTED outcomes carry a detail; every other kind must not.
    """

    kind: OutcomeKind
    detail: str | None = None

    def __post_init__(self) -> None:
        """Enforce that detail is present exactly for UNEXPECTED."""
        if self.kind == OutcomeKind.UNEXPECTED and not self.detail:
            msg = "Unexpected outcomes require an error detail"
            raise ValueError(msg)
        if self.kind != OutcomeKind.UNEXPECTED and self.detail is not None:
            msg = f"{self.kind.name} outcomes cannot carry a detail"
            raise ValueError(msg)

    @classmethod
    def clean(cls) -> StatusOutcome:
        return cls(OutcomeKind.CLEAN)

    @classmethod
    def unclean(cls) -> StatusOutcome:
        return cls(OutcomeKind.UNCLEAN)

    @classmethod
    def repository_error(cls) -> StatusOutcome:
        return cls(OutcomeKind.REPOSITORY_ERROR)

    @classmethod
    def unexpected(cls, detail: str) -> StatusOutcome:
        return cls(OutcomeKind.UNEXPECTED, detail or "unknown error")

    @property
    def label(self) -> str:
        """Fixed-width report label for this outcome."""
        return self.kind.label


@dataclass(frozen=True, slots=True)
class ScanSection:
    """An ordered batch of candidates to scan together.

    Attributes:
        section: Which configuration section the candidates came from.
        candidates: Candidates in submission order (immutable).
    """

    section: Section
    candidates: tuple[CandidatePath, ...] = ()

    def __len__(self) -> int:
        return len(self.candidates)


@dataclass(frozen=True, slots=True)
class SectionReport:
    """Outcomes for one section, in submission order.

    Attributes:
        section: The section these entries belong to.
        entries: (candidate, outcome) pairs in submission order.
    """

    section: Section
    entries: tuple[tuple[CandidatePath, StatusOutcome], ...] = ()

    def counts(self) -> dict[str, int]:
        """Count outcomes by kind, including zero counts."""
        summary = {kind.value: 0 for kind in OutcomeKind}
        for _, outcome in self.entries:
            summary[outcome.kind.value] += 1
        summary["total"] = len(self.entries)
        return summary

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "section": self.section.value,
            "entries": [
                {
                    "path": candidate.path,
                    "name": candidate.name,
                    "collection": candidate.collection,
                    "status": outcome.kind.value,
                    "detail": outcome.detail,
                }
                for candidate, outcome in self.entries
            ],
            "summary": self.counts(),
        }


@dataclass(frozen=True, slots=True)
class ScanMetadata:
    """Metadata for a scan report.

    Attributes:
        timestamp: ISO format timestamp when the scan was performed.
        hostname: Name of the machine that was scanned.
        statusctl_version: Version of statusctl that performed the scan.
    """

    timestamp: str
    hostname: str
    statusctl_version: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "timestamp": self.timestamp,
            "hostname": self.hostname,
            "statusctl_version": self.statusctl_version,
        }

    @classmethod
    def create(cls) -> ScanMetadata:
        """Create metadata for a scan happening now."""
        import socket

        from statusctl import __version__

        return cls(
            timestamp=datetime.now(UTC).isoformat(),
            hostname=socket.gethostname(),
            statusctl_version=__version__,
        )


@dataclass(frozen=True, slots=True)
class ScanReport:
    """Complete scan report.

    Attributes:
        metadata: Scan metadata including timestamp and hostname.
        sections: Section reports in report order.
    """

    metadata: ScanMetadata
    sections: list[SectionReport] = field(default_factory=lambda: [])

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "metadata": self.metadata.to_dict(),
            "sections": [section.to_dict() for section in self.sections],
        }
