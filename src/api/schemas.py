"""
Pydantic models for API requests and responses.
"""

from typing import List

from pydantic import BaseModel, Field

from src.entities.archive_entry import ArchiveEntry
from src.entities.scan_result import ScanResult


class EntryInfo(BaseModel):
    """Schema for archive entry information."""

    name: str = Field(..., description="Entry name inside the archive")
    is_directory: bool = Field(..., description="Whether the entry is a directory")
    size: int = Field(..., description="Uncompressed size in bytes")
    compressed_size: int = Field(..., description="Compressed size in bytes")
    type: str = Field(..., description="Entry type/extension")

    @classmethod
    def from_entity(cls, entry: ArchiveEntry):
        """Create an EntryInfo schema from an ArchiveEntry entity."""
        return cls(**entry.get_details())


class EntryListResponse(BaseModel):
    """Schema for archive scan response."""

    relative_path: str = Field(..., description="In-archive path that was listed")
    recursive: bool = Field(..., description="Whether descendants were included")
    entries: List[EntryInfo] = Field(..., description="Selected entries")

    @classmethod
    def from_result(cls, result: ScanResult):
        return cls(
            relative_path=result.relative_path,
            recursive=result.recursive,
            entries=[EntryInfo.from_entity(e) for e in result.entries],
        )


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")


class HealthResponse(BaseModel):
    status: str = Field("ok", description="Service status")
