"""
Pytest configuration and shared fixtures.
"""

import zipfile
from unittest.mock import MagicMock

import pytest

from src.container import DependencyContainer

SAMPLE_JAR_ENTRIES = [
    ("META-INF/", b""),
    ("META-INF/MANIFEST.MF", b"Manifest-Version: 1.0\n"),
    ("com/", b""),
    ("com/acme/", b""),
    ("com/acme/App.class", b"\xca\xfe\xba\xbe" * 8),
    ("com/acme/util/", b""),
    ("com/acme/util/Strings.class", b"\xca\xfe\xba\xbe" * 4),
    ("README.txt", b"Sample archive."),
]


@pytest.fixture
def sample_jar(tmp_path):
    """
    Create a small JAR file for testing archive operations.

    Returns:
        Path (str) to the archive
    """
    archive_path = tmp_path / "sample.jar"
    with zipfile.ZipFile(archive_path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for name, data in SAMPLE_JAR_ENTRIES:
            zf.writestr(name, data)
    return str(archive_path)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
