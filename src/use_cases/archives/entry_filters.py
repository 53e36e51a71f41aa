"""
Reusable entry filters to pass as the pre-filter of an archive scan.
"""

import fnmatch

from src.entities.archive_entry import ArchiveEntry
from src.ports.archives.archive_repository_port import EntryFilter


def files_only(entry: ArchiveEntry) -> bool:
    return not entry.is_directory


def directories_only(entry: ArchiveEntry) -> bool:
    return entry.is_directory


def name_endswith(*suffixes: str) -> EntryFilter:
    """Accept entries whose name ends with one of ``suffixes`` (e.g. ``.class``)."""
    if not suffixes:
        raise ValueError("At least one suffix is required")
    return lambda entry: entry.name.endswith(suffixes)


def name_matches(pattern: str) -> EntryFilter:
    """Accept entries whose full name matches a shell-style glob pattern."""
    return lambda entry: fnmatch.fnmatchcase(entry.name, pattern)


def all_of(*filters: EntryFilter) -> EntryFilter:
    """Combine filters; an entry must pass every one of them."""
    return lambda entry: all(f(entry) for f in filters)
