"""
Archive repository port interface defining the contract for archive access.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Optional
from zipfile import ZipFile

from src.entities.archive_entry import ArchiveEntry

EntryFilter = Callable[[ArchiveEntry], bool]


class ArchiveRepositoryPort(ABC):
    """Port interface for archive operations."""

    @abstractmethod
    def open_archive(self, archive_path: str) -> ZipFile:
        """
        Open an archive for reading. The caller is responsible for closing it.

        Args:
            archive_path: Filesystem path of the archive

        Returns:
            An open, readable archive handle

        Raises:
            ArchiveIOError: If the archive cannot be opened
        """
        pass

    @abstractmethod
    def list_entries(
        self, archive: ZipFile, entry_filter: Optional[EntryFilter] = None
    ) -> list[ArchiveEntry]:
        """
        List the entries of an open archive, in archive order.

        Args:
            archive: Open archive handle
            entry_filter: Optional predicate; only entries it accepts are returned

        Returns:
            List of ArchiveEntry entities

        Raises:
            ArchiveIOError: If the archive directory cannot be read
        """
        pass
