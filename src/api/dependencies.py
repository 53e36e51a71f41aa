"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from src.container import container
from src.use_cases.archives.scan_entries import ScanArchiveEntriesUseCase


def get_scan_entries_uc() -> ScanArchiveEntriesUseCase:
    """
    Get the scan entries use case from the container.

    Returns:
        ScanArchiveEntriesUseCase: The scan entries use case instance
    """
    return container.get_scan_entries_use_case()
