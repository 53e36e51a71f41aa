"""
Archive location domain entity.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ArchiveLocation:
    """A resolved location: the archive file plus the in-archive path to list."""

    archive_path: str
    relative_path: str = ""

    def points_at_root(self) -> bool:
        return self.relative_path == ""
