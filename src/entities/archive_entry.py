"""
Archive entry domain entity.
"""

import posixpath
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ArchiveEntry:
    """
    One named entry of an archive: either a directory marker or a leaf file.

    Equality and hashing only consider ``name`` and ``is_directory``; the size
    fields are informational copies of the archive directory record.
    """

    name: str
    is_directory: bool = False
    size: int = field(default=0, compare=False)
    compressed_size: int = field(default=0, compare=False)

    @property
    def entry_type(self) -> str:
        """Extract the entry type (``directory`` or the file extension)."""
        if self.is_directory:
            return "directory"
        _, ext = posixpath.splitext(self.name)
        return ext.lstrip(".") if ext else "no_extension"

    def get_details(self) -> dict[str, Any]:
        """
        Get comprehensive entry details.

        Returns:
            Dictionary with entry information
        """
        return {
            "name": self.name,
            "is_directory": self.is_directory,
            "size": self.size,
            "compressed_size": self.compressed_size,
            "type": self.entry_type,
        }

    def __str__(self) -> str:
        return self.name
