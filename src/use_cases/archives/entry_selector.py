"""
Selection of the archive entries that make up a directory listing.
"""

from collections.abc import Iterable

from src.entities.archive_entry import ArchiveEntry
from src.exceptions import NullInputError

PATH_SEPARATOR = "/"


def _accepts(entry: ArchiveEntry, relative_path: str, recursive: bool) -> bool:
    name = entry.name
    if recursive:
        return name.startswith(relative_path)
    if entry.is_directory:
        return name == relative_path
    # Leaves must sit directly under relative_path, not deeper
    if name.find(relative_path) != 0:
        return False
    return name.find(PATH_SEPARATOR, len(relative_path)) < 0


def select_entries(
    entries: Iterable[ArchiveEntry], relative_path: str, recursive: bool
) -> tuple[ArchiveEntry, ...]:
    """
    Select the entries listed under ``relative_path``.

    In recursive mode every entry whose name starts with ``relative_path`` is
    kept. Otherwise directories must equal ``relative_path`` exactly and files
    must start with it with no further ``/`` after the prefix.

    Args:
        entries: Entries in archive order (already pre-filtered)
        relative_path: In-archive directory prefix; empty string is the root
        recursive: Whether to include descendants at any depth

    Returns:
        Matching entries in input order, without duplicates

    Raises:
        NullInputError: If entries or relative_path is None
    """
    if entries is None:
        raise NullInputError("Entries must not be None")
    if relative_path is None:
        raise NullInputError("Relative path must not be None")

    selected: dict[ArchiveEntry, None] = {}
    for entry in entries:
        if _accepts(entry, relative_path, recursive):
            selected.setdefault(entry, None)
    return tuple(selected)


class EntrySelector:
    """Stateless selector; share the module-level ``entry_selector`` instance."""

    def select(
        self, entries: Iterable[ArchiveEntry], relative_path: str, recursive: bool
    ) -> tuple[ArchiveEntry, ...]:
        return select_entries(entries, relative_path, recursive)


entry_selector = EntrySelector()
