"""
Use case for scanning the entries of an archive.
"""

import logging
from typing import Optional
from zipfile import ZipFile

from src.entities.scan_result import ScanResult
from src.exceptions import BaseAppError, NullInputError
from src.ports.archives.archive_repository_port import (
    ArchiveRepositoryPort,
    EntryFilter,
)
from src.ports.archives.location_resolver_port import LocationResolverPort
from src.use_cases.archives.entry_selector import EntrySelector, entry_selector


class ScanArchiveEntriesUseCase:
    """Use case for listing the entries under a path inside an archive."""

    def __init__(
        self,
        location_resolver: LocationResolverPort,
        archive_repository: ArchiveRepositoryPort,
        selector: EntrySelector = entry_selector,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            location_resolver: Resolver for location identifiers
            archive_repository: Repository for archive operations
            selector: Entry selector applying the listing rule
            logger: Logger instance to use for logging
        """
        self._location_resolver = location_resolver
        self._archive_repository = archive_repository
        self._selector = selector
        self._logger = logger or logging.getLogger(__name__)

    def _scan(
        self,
        archive: ZipFile,
        relative_path: str,
        recursive: bool,
        entry_filter: Optional[EntryFilter],
    ) -> ScanResult:
        entries = self._archive_repository.list_entries(archive, entry_filter)
        selected = self._selector.select(entries, relative_path, recursive)
        self._logger.info(f"Selected {len(selected)} of {len(entries)} entries")
        return ScanResult(
            relative_path=relative_path, recursive=recursive, entries=selected
        )

    def execute(
        self,
        location: str,
        recursive: bool,
        entry_filter: Optional[EntryFilter] = None,
    ) -> ScanResult:
        """
        Scan the archive a location identifier points into.

        The archive is opened for the duration of the call and closed afterwards.

        Args:
            location: Location of an archive or of a directory inside one
            recursive: Whether to include descendants at any depth
            entry_filter: Optional predicate applied before selection

        Returns:
            ScanResult with the selected entries

        Raises:
            NullInputError: If location is None
            InvalidArgumentError: If the location cannot be resolved
            ArchiveIOError: If the archive cannot be opened or read
        """
        if location is None:
            raise NullInputError("Location must not be None")
        try:
            self._logger.info(f"Scanning {location} (recursive={recursive})")
            resolved = self._location_resolver.resolve(location)
            target = (
                "archive root" if resolved.points_at_root() else resolved.relative_path
            )
            self._logger.debug(f"Listing {target} of {resolved.archive_path}")
            archive = self._archive_repository.open_archive(resolved.archive_path)
            try:
                return self._scan(
                    archive, resolved.relative_path, recursive, entry_filter
                )
            finally:
                archive.close()
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error scanning {location}: {e}")
            raise

    def execute_archive(
        self,
        archive: ZipFile,
        recursive: bool,
        entry_filter: Optional[EntryFilter] = None,
    ) -> ScanResult:
        """
        Scan an already open archive from its root. The handle is left open.

        Args:
            archive: Open archive handle
            recursive: Whether to include descendants at any depth
            entry_filter: Optional predicate applied before selection

        Returns:
            ScanResult with the selected entries

        Raises:
            NullInputError: If archive is None
            ArchiveIOError: If the archive cannot be read
        """
        if archive is None:
            raise NullInputError("Archive must not be None")
        try:
            self._logger.info(f"Scanning open archive (recursive={recursive})")
            return self._scan(archive, "", recursive, entry_filter)
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error scanning open archive: {e}")
            raise
