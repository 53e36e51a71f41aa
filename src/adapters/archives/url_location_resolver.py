"""
URL-based location resolver: turns jar:/zip:/file: URLs and bare paths into archive locations.
"""

import logging
import os
import re
from typing import Optional
from urllib.parse import unquote, urlsplit

from typing_extensions import override

from src.entities.archive_location import ArchiveLocation
from src.exceptions import InvalidArgumentError, NullInputError
from src.ports.archives.location_resolver_port import LocationResolverPort

ARCHIVE_SCHEMES = ("jar", "zip")
ENTRY_SEPARATOR = "!/"

_SCHEME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.-]*):")


class UrlLocationResolver(LocationResolverPort):
    """Resolve ``jar:file:/app.jar!/com/acme/`` style identifiers."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @staticmethod
    def _scheme_of(location: str) -> Optional[str]:
        match = _SCHEME_RE.match(location)
        # Single letters are Windows drive letters, not schemes
        if match is None or len(match.group(1)) == 1:
            return None
        return match.group(1).lower()

    @staticmethod
    def _normalize_relative_path(path: str) -> str:
        """Collapse repeated slashes and drop the leading one; a trailing slash is kept."""
        return re.sub(r"/+", "/", path).lstrip("/")

    def _file_url_to_path(self, url: str, location: str) -> str:
        # Path characters "?" and "#" must be percent-encoded in file URLs
        if "?" in url or "#" in url:
            raise InvalidArgumentError(
                f"File URL contains an unescaped '?' or '#': {location}"
            )
        parts = urlsplit(url)
        if parts.netloc not in ("", "localhost"):
            raise InvalidArgumentError(
                f"Remote archive locations are not supported: {location}"
            )
        return unquote(parts.path)

    def _archive_url_to_path(self, url: str, location: str) -> str:
        scheme = self._scheme_of(url)
        if scheme == "file":
            return self._file_url_to_path(url, location)
        if scheme is not None:
            raise InvalidArgumentError(
                f"Unsupported archive URL scheme '{scheme}': {location}"
            )
        return unquote(url)

    @override
    def resolve(self, location: str) -> ArchiveLocation:
        if location is None:
            raise NullInputError("Location must not be None")
        raw = location.strip()
        if not raw:
            raise InvalidArgumentError("Location must be a non-empty string")

        scheme = self._scheme_of(raw)
        if scheme in ARCHIVE_SCHEMES:
            body = raw[len(scheme) + 1 :]
            if ENTRY_SEPARATOR not in body:
                raise InvalidArgumentError(
                    f"Archive URL is missing the '{ENTRY_SEPARATOR}' separator: {location}"
                )
            archive_url, _, entry_path = body.partition(ENTRY_SEPARATOR)
            archive_path = self._archive_url_to_path(archive_url, location)
            relative_path = unquote(entry_path)
        elif scheme == "file":
            archive_url, _, entry_path = raw.partition(ENTRY_SEPARATOR)
            archive_path = self._file_url_to_path(archive_url, location)
            relative_path = unquote(entry_path)
        elif scheme is None or os.path.exists(raw.partition(ENTRY_SEPARATOR)[0]):
            # Bare path, including existing files named like "app:v2.jar"
            archive_path, _, relative_path = raw.partition(ENTRY_SEPARATOR)
        else:
            raise InvalidArgumentError(
                f"Unsupported location scheme '{scheme}': {location}"
            )

        if not archive_path:
            raise InvalidArgumentError(f"Location does not name an archive: {location}")

        resolved = ArchiveLocation(
            archive_path=archive_path,
            relative_path=self._normalize_relative_path(relative_path),
        )
        self._logger.debug(
            f"Resolved {location} to archive {resolved.archive_path} "
            f"at '{resolved.relative_path}'"
        )
        return resolved
