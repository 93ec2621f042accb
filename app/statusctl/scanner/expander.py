"""Collection expansion and scan planning.

A collection is a directory whose immediate subdirectories are each
treated as a repository. Expansion is one level deep; files and other
non-directory entries are never candidates. Planning turns a loaded
configuration into ordered, deduplicated scan sections before any
inspection starts.
"""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from statusctl.models.config import StatusConfig
from statusctl.models.status import CandidatePath, ScanSection, Section

logger = logging.getLogger(__name__)


class CollectionError(Exception):
    """Raised when a collection directory cannot be expanded.

    This is a configuration problem that aborts the whole run.
    """


def _absolute(path: str) -> str:
    """Return the absolute, normalized form of path without resolving symlinks.

    Raises:
        OSError: If the current working directory cannot be determined.
    """
    return os.path.abspath(os.path.expanduser(path))


def expand_collection(collection: str) -> list[CandidatePath]:
    """Expand a collection into its immediate subdirectories.

    Entries are returned sorted by name. A symlink pointing at a directory
    counts as a directory.

    Args:
        collection: Collection directory path as configured.

    Returns:
        CandidatePath for every subdirectory, with absolute paths.

    Raises:
        CollectionError: If the collection cannot be read or a member
            cannot be made absolute.
    """
    root = Path(os.path.expanduser(collection))
    try:
        entries = sorted(root.iterdir(), key=lambda p: p.name)
    except PermissionError as e:
        raise CollectionError(f"Cannot read collection {collection}: Permission denied") from e
    except FileNotFoundError as e:
        raise CollectionError(f"Collection not found: {collection}") from e
    except NotADirectoryError as e:
        raise CollectionError(f"Collection is not a directory: {collection}") from e
    except OSError as e:
        raise CollectionError(f"Cannot read collection {collection}: {e}") from e

    candidates: list[CandidatePath] = []
    for entry in entries:
        try:
            is_dir = entry.is_dir()
        except OSError:
            logger.debug("Cannot stat %s, skipping", entry)
            continue
        if not is_dir:
            logger.debug("Skipping non-directory entry: %s", entry)
            continue

        try:
            path = _absolute(str(entry))
        except OSError as e:
            raise CollectionError(f"Cannot resolve {entry}: {e}") from e

        candidates.append(
            CandidatePath(
                path=path,
                section=Section.COLLECTIONS,
                name=entry.name,
                collection=collection,
            )
        )

    return candidates


def standalone_candidate(repository: str) -> CandidatePath:
    """Build the candidate for a standalone repository entry.

    If the path cannot be made absolute, the configured path is kept as is
    so inspection reports the failure for this entry alone.

    Args:
        repository: Repository path as configured.

    Returns:
        CandidatePath in the repositories section.
    """
    try:
        path = _absolute(repository)
    except OSError as e:
        logger.debug("Cannot resolve %s: %s", repository, e)
        path = repository
    return CandidatePath(
        path=path,
        section=Section.REPOSITORIES,
        name=os.path.basename(path.rstrip(os.sep)) or path,
    )


def _dedupe(candidates: Iterable[CandidatePath]) -> tuple[CandidatePath, ...]:
    """Drop repeated paths, keeping the first occurrence."""
    seen: set[str] = set()
    unique: list[CandidatePath] = []
    for candidate in candidates:
        if candidate.path in seen:
            logger.debug("Dropping duplicate %s entry: %s", candidate.section.value, candidate.path)
            continue
        seen.add(candidate.path)
        unique.append(candidate)
    return tuple(unique)


def build_scan_plan(config: StatusConfig) -> list[ScanSection]:
    """Expand a configuration into ordered scan sections.

    Collections are expanded in declaration order, then standalone
    repositories follow. Duplicates within a section are dropped.

    Args:
        config: Loaded configuration.

    Returns:
        Two sections: collections, then repositories.

    Raises:
        CollectionError: If any collection cannot be expanded.
    """
    collection_members: list[CandidatePath] = []
    for collection in config.collections:
        members = expand_collection(collection)
        logger.debug("Collection %s expanded to %d candidates", collection, len(members))
        collection_members.extend(members)

    repositories = [standalone_candidate(repo) for repo in config.repositories]

    return [
        ScanSection(section=Section.COLLECTIONS, candidates=_dedupe(collection_members)),
        ScanSection(section=Section.REPOSITORIES, candidates=_dedupe(repositories)),
    ]
