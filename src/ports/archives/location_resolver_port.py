"""
Location resolver port interface defining how location identifiers map to archives.
"""

from abc import ABC, abstractmethod

from src.entities.archive_location import ArchiveLocation


class LocationResolverPort(ABC):
    """Port interface for resolving location identifiers."""

    @abstractmethod
    def resolve(self, location: str) -> ArchiveLocation:
        """
        Resolve a location identifier into an archive path and relative path.

        Args:
            location: A ``jar:``/``zip:``/``file:`` URL or a bare filesystem path

        Returns:
            The resolved ArchiveLocation

        Raises:
            NullInputError: If location is None
            InvalidArgumentError: If location is malformed or does not point into an archive
        """
        pass

    def resolve_relative_path(self, location: str) -> str:
        """Return only the in-archive path a location identifier designates."""
        return self.resolve(location).relative_path
