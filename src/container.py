"""
Dependency injection container for managing application dependencies.
"""

import logging

from src.adapters.archives.url_location_resolver import UrlLocationResolver
from src.adapters.archives.zip_archive_adapter import ZipArchiveAdapter
from src.ports.archives.archive_repository_port import ArchiveRepositoryPort
from src.ports.archives.location_resolver_port import LocationResolverPort
from src.use_cases.archives.entry_selector import EntrySelector, entry_selector
from src.use_cases.archives.scan_entries import ScanArchiveEntriesUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_location_resolver(self) -> LocationResolverPort:
        """
        Get location resolver adapter instance.

        Returns:
            LocationResolverPort implementation
        """
        if "location_resolver" not in self._instances:
            self._instances["location_resolver"] = UrlLocationResolver(self._logger)
        return self._instances["location_resolver"]

    def get_archive_repository(self) -> ArchiveRepositoryPort:
        """
        Get archive repository adapter instance.

        Returns:
            ArchiveRepositoryPort implementation
        """
        if "archive_repository" not in self._instances:
            self._instances["archive_repository"] = ZipArchiveAdapter(self._logger)
        return self._instances["archive_repository"]

    def get_entry_selector(self) -> EntrySelector:
        return entry_selector

    def get_scan_entries_use_case(self) -> ScanArchiveEntriesUseCase:
        """
        Get scan entries use case with injected dependencies.

        Returns:
            Configured ScanArchiveEntriesUseCase
        """
        if "scan_entries_use_case" not in self._instances:
            self._instances["scan_entries_use_case"] = ScanArchiveEntriesUseCase(
                self.get_location_resolver(),
                self.get_archive_repository(),
                self.get_entry_selector(),
                self._logger,
            )
        return self._instances["scan_entries_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
