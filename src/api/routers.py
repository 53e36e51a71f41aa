"""
FastAPI router definitions for the API endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from src.api.dependencies import get_scan_entries_uc
from src.api.schemas import EntryListResponse, ErrorResponse, HealthResponse
from src.exceptions import ArchiveIOError, InvalidArgumentError, NullInputError
from src.ports.archives.archive_repository_port import EntryFilter
from src.use_cases.archives.entry_filters import all_of, name_endswith, name_matches

router = APIRouter()


def _build_entry_filter(
    suffixes: List[str], pattern: Optional[str]
) -> Optional[EntryFilter]:
    filters: list[EntryFilter] = []
    if suffixes:
        filters.append(name_endswith(*suffixes))
    if pattern:
        filters.append(name_matches(pattern))
    if not filters:
        return None
    return filters[0] if len(filters) == 1 else all_of(*filters)


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok")


@router.get(
    "/archives/entries",
    response_model=EntryListResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def list_entries(
    location: str = Query(..., description="Archive location, e.g. jar:file:/app.jar!/com/"),
    recursive: bool = Query(False, description="Whether to list descendants at any depth"),
    suffix: List[str] = Query(default=[], description="Only keep entries ending with these suffixes"),
    pattern: Optional[str] = Query(None, description="Only keep entries matching this glob"),
):
    """
    List the entries of an archive under the path the location points at.

    Args:
        location: Location of an archive or of a directory inside one
        recursive: Whether to list descendants at any depth (default: False)
        suffix: Optional name suffixes to pre-filter on
        pattern: Optional glob pattern to pre-filter on

    Returns:
        EntryListResponse: The selected entries

    Raises:
        HTTPException: 400 for bad locations, 404 for unreadable archives
    """
    try:
        entry_filter = _build_entry_filter(suffix, pattern)
        result = get_scan_entries_uc().execute(location, recursive, entry_filter)
        return EntryListResponse.from_result(result)
    except (InvalidArgumentError, NullInputError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ArchiveIOError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
