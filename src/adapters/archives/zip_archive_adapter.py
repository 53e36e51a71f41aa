"""
ZIP/JAR adapter implementation for archive operations.
"""

import logging
import os
import zipfile
from typing import Optional

from typing_extensions import override

from src.entities.archive_entry import ArchiveEntry
from src.exceptions import ArchiveIOError, NullInputError
from src.ports.archives.archive_repository_port import (
    ArchiveRepositoryPort,
    EntryFilter,
)


class ZipArchiveAdapter(ArchiveRepositoryPort):
    """Zipfile-backed implementation of the archive repository port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _validate_archive_path(self, archive_path: str) -> None:
        """
        Validate that an archive path exists and is a regular file.

        Raises:
            ArchiveIOError: If the path does not exist or is a directory
        """
        if not os.path.exists(archive_path):
            raise ArchiveIOError(f"Archive does not exist: {archive_path}")

        if os.path.isdir(archive_path):
            raise ArchiveIOError(f"Path is a directory, not an archive: {archive_path}")

    @staticmethod
    def _to_entry(info: zipfile.ZipInfo) -> ArchiveEntry:
        return ArchiveEntry(
            name=info.filename,
            is_directory=info.is_dir(),
            size=info.file_size,
            compressed_size=info.compress_size,
        )

    @override
    def open_archive(self, archive_path: str) -> zipfile.ZipFile:
        """
        Open a ZIP/JAR archive for reading.

        Args:
            archive_path: Filesystem path of the archive

        Returns:
            Open ZipFile; the caller closes it

        Raises:
            ArchiveIOError: If the archive is missing, not a ZIP file, or unreadable
        """
        if archive_path is None:
            raise NullInputError("Archive path must not be None")

        self._validate_archive_path(archive_path)
        try:
            return zipfile.ZipFile(archive_path)
        except zipfile.BadZipFile as e:
            raise ArchiveIOError(f"Not a valid archive: {archive_path}: {e}") from e
        except OSError as e:
            raise ArchiveIOError(f"Cannot open archive {archive_path}: {e}") from e

    @override
    def list_entries(
        self, archive: zipfile.ZipFile, entry_filter: Optional[EntryFilter] = None
    ) -> list[ArchiveEntry]:
        """
        List the entries of an open archive in central-directory order.

        Args:
            archive: Open archive handle
            entry_filter: Optional predicate applied to each entry

        Returns:
            List of ArchiveEntry entities

        Raises:
            ArchiveIOError: If the archive directory cannot be read
        """
        if archive is None:
            raise NullInputError("Archive must not be None")

        try:
            infos = archive.infolist()
        except (OSError, ValueError) as e:
            self._logger.error(f"Cannot read archive directory: {e}")
            raise ArchiveIOError(f"Cannot read archive entries: {e}") from e

        entries = [self._to_entry(info) for info in infos]
        if entry_filter is not None:
            entries = [entry for entry in entries if entry_filter(entry)]

        self._logger.debug(f"Read {len(entries)} entries from {archive.filename}")
        return entries
