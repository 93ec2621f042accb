"""Concurrent scan coordination.

Each section is scanned with one inspection task per candidate. Every
task writes its outcome into its own pre-allocated slot, and the section
is only returned once all slots are filled, so report order always equals
submission order whatever order the tasks finish in.
"""

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor, wait

from statusctl.models.status import (
    CandidatePath,
    ScanMetadata,
    ScanReport,
    ScanSection,
    SectionReport,
    StatusOutcome,
)
from statusctl.scanner.inspector import StatusInspector

logger = logging.getLogger(__name__)


class ScanCoordinator:
    """Fans inspections out over a thread pool, one section at a time.

    Args:
        inspector: Inspector used for every candidate.
        max_workers: Upper bound on concurrent inspections per section.
            None runs one worker per candidate.
    """

    def __init__(
        self,
        inspector: StatusInspector | None = None,
        *,
        max_workers: int | None = None,
    ) -> None:
        if max_workers is not None and max_workers < 1:
            msg = f"max_workers must be at least 1, got {max_workers}"
            raise ValueError(msg)
        self._inspector = inspector or StatusInspector()
        self._max_workers = max_workers

    def scan_section(self, section: ScanSection) -> SectionReport:
        """Inspect every candidate of a section concurrently.

        Blocks until all inspections have finished.

        Args:
            section: Candidates to inspect, in submission order.

        Returns:
            SectionReport with one outcome per candidate, in submission order.
        """
        count = len(section)
        if count == 0:
            return SectionReport(section=section.section)

        candidates = section.candidates
        slots: list[StatusOutcome | None] = [None] * count
        workers = self._pool_size(count)
        logger.debug(
            "Scanning %d %s with %d workers",
            count,
            section.section.value,
            workers,
        )

        def run(index: int, candidate: CandidatePath) -> None:
            slots[index] = self._inspector.inspect(candidate.path)

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="statusctl") as pool:
            futures = [pool.submit(run, i, c) for i, c in enumerate(candidates)]
            wait(futures)

        entries: list[tuple[CandidatePath, StatusOutcome]] = []
        for candidate, future, outcome in zip(candidates, futures, slots, strict=True):
            error = future.exception()
            if outcome is None:
                # Inspector broke its own contract; keep the path in the report
                detail = f"{type(error).__name__}: {error}" if error else "no outcome produced"
                logger.error("No outcome for %s: %s", candidate.path, detail)
                outcome = StatusOutcome.unexpected(detail)
            entries.append((candidate, outcome))

        return SectionReport(section=section.section, entries=tuple(entries))

    def scan(self, plan: Iterable[ScanSection]) -> ScanReport:
        """Scan all sections in order.

        Each section is fully joined before the next one starts.

        Args:
            plan: Sections in report order.

        Returns:
            ScanReport holding one SectionReport per section.
        """
        metadata = ScanMetadata.create()
        sections = [self.scan_section(section) for section in plan]
        return ScanReport(metadata=metadata, sections=sections)

    def _pool_size(self, count: int) -> int:
        if self._max_workers is None:
            return count
        return min(count, self._max_workers)
