"""
Tests for the UrlLocationResolver.
"""

import pytest

from src.adapters.archives.url_location_resolver import UrlLocationResolver
from src.entities.archive_location import ArchiveLocation
from src.exceptions import InvalidArgumentError, NullInputError


@pytest.fixture
def resolver(mock_logger):
    return UrlLocationResolver(mock_logger)


class TestUrlLocationResolver:
    """Test cases for the UrlLocationResolver."""

    @pytest.mark.parametrize(
        "location, expected",
        [
            (
                "jar:file:/opt/app.jar!/com/acme/",
                ArchiveLocation("/opt/app.jar", "com/acme/"),
            ),
            (
                "jar:file:///opt/app.jar!/com/acme/App.class",
                ArchiveLocation("/opt/app.jar", "com/acme/App.class"),
            ),
            ("jar:file:/opt/app.jar!/", ArchiveLocation("/opt/app.jar", "")),
            ("zip:/data/bundle.zip!/docs", ArchiveLocation("/data/bundle.zip", "docs")),
            ("JAR:file:/opt/app.jar!/x/", ArchiveLocation("/opt/app.jar", "x/")),
            ("file:/opt/app.jar", ArchiveLocation("/opt/app.jar", "")),
            ("file://localhost/opt/app.jar", ArchiveLocation("/opt/app.jar", "")),
            ("file:/opt/app.jar!/lib/", ArchiveLocation("/opt/app.jar", "lib/")),
            ("/opt/app.jar", ArchiveLocation("/opt/app.jar", "")),
            ("lib/app.jar!/META-INF/", ArchiveLocation("lib/app.jar", "META-INF/")),
            ("  /opt/app.jar  ", ArchiveLocation("/opt/app.jar", "")),
        ],
    )
    def test_resolve(self, resolver, location, expected):
        assert resolver.resolve(location) == expected

    def test_percent_escapes_are_decoded(self, resolver):
        resolved = resolver.resolve("jar:file:/opt/my%20app.jar!/some%20dir/")
        assert resolved == ArchiveLocation("/opt/my app.jar", "some dir/")

    def test_relative_path_is_normalized(self, resolver):
        resolved = resolver.resolve("jar:file:/opt/app.jar!//com//acme/")
        assert resolved.relative_path == "com/acme/"

    def test_trailing_slash_is_preserved(self, resolver):
        assert resolver.resolve("jar:file:/a.jar!/x/").relative_path == "x/"
        assert resolver.resolve("jar:file:/a.jar!/x").relative_path == "x"

    def test_windows_drive_letter_is_not_a_scheme(self, resolver):
        resolved = resolver.resolve("C:/libs/app.jar")
        assert resolved == ArchiveLocation("C:/libs/app.jar", "")

    def test_resolve_relative_path(self, resolver):
        assert resolver.resolve_relative_path("jar:file:/a.jar!/com/") == "com/"
        assert resolver.resolve_relative_path("/a.jar") == ""

    def test_points_at_root(self, resolver):
        assert resolver.resolve("/a.jar").points_at_root()
        assert not resolver.resolve("jar:file:/a.jar!/com/").points_at_root()

    def test_missing_separator(self, resolver):
        with pytest.raises(InvalidArgumentError, match="missing the '!/' separator"):
            resolver.resolve("jar:file:/opt/app.jar")

    @pytest.mark.parametrize(
        "location",
        ["http://example.com/app.jar", "ftp://host/app.zip"],
    )
    def test_unsupported_scheme(self, resolver, location):
        with pytest.raises(InvalidArgumentError, match="Unsupported location scheme"):
            resolver.resolve(location)

    def test_unsupported_inner_scheme(self, resolver):
        with pytest.raises(InvalidArgumentError, match="Unsupported archive URL scheme"):
            resolver.resolve("jar:http://example.com/app.jar!/com/")

    @pytest.mark.parametrize(
        "location",
        [
            "jar:file:/opt/lib#1/app.jar!/com/",
            "file:/opt/lib?x/app.jar",
            "file:/opt/app.jar?",
            "zip:file:/data/a#b.zip!/",
        ],
    )
    def test_unescaped_query_or_fragment(self, resolver, location):
        with pytest.raises(InvalidArgumentError, match="unescaped '\\?' or '#'"):
            resolver.resolve(location)

    def test_escaped_query_and_fragment(self, resolver):
        resolved = resolver.resolve("jar:file:/opt/lib%231/app%3F.jar!/com/")
        assert resolved == ArchiveLocation("/opt/lib#1/app?.jar", "com/")

    def test_existing_file_with_colon_is_a_bare_path(
        self, resolver, tmp_path, monkeypatch
    ):
        (tmp_path / "app:v2.jar").write_bytes(b"")
        monkeypatch.chdir(tmp_path)

        assert resolver.resolve("app:v2.jar") == ArchiveLocation("app:v2.jar", "")
        assert resolver.resolve("app:v2.jar!/com/") == ArchiveLocation(
            "app:v2.jar", "com/"
        )

    def test_missing_file_with_colon_is_a_scheme(self, resolver, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        with pytest.raises(InvalidArgumentError, match="Unsupported location scheme 'app'"):
            resolver.resolve("app:v2.jar")

    def test_remote_file_url(self, resolver):
        with pytest.raises(InvalidArgumentError, match="Remote archive locations"):
            resolver.resolve("file://fileserver/share/app.jar")

    @pytest.mark.parametrize("location", ["", "   "])
    def test_blank_location(self, resolver, location):
        with pytest.raises(InvalidArgumentError, match="non-empty string"):
            resolver.resolve(location)

    @pytest.mark.parametrize("location", ["jar:!/com/", "!/com/"])
    def test_missing_archive_path(self, resolver, location):
        with pytest.raises(InvalidArgumentError, match="does not name an archive"):
            resolver.resolve(location)

    def test_none_location(self, resolver):
        with pytest.raises(NullInputError):
            resolver.resolve(None)  # type: ignore[arg-type]
