"""Configuration model for statusctl.

This module defines the Pydantic model representing config.toml, which
lists the collections and standalone repositories to inspect.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class StatusConfig(BaseModel):
    """The two path lists driving a scan.

    Entries are opaque filesystem paths. They may be relative or absolute,
    may repeat, and are not checked against the filesystem at load time.

    Attributes:
        collections: Directories whose immediate subdirectories are repositories.
        repositories: Individual repository directories.
        max_workers: Optional cap on concurrent inspections per section.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    collections: Annotated[
        list[str],
        Field(default_factory=list, description="Directories of repositories"),
    ]
    repositories: Annotated[
        list[str],
        Field(default_factory=list, description="Individual repositories"),
    ]
    max_workers: Annotated[
        int | None,
        Field(default=None, ge=1, description="Concurrent inspections per section"),
    ]

    @property
    def is_empty(self) -> bool:
        """Check if nothing is configured."""
        return not self.collections and not self.repositories
