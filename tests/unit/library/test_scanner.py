"""Tests for library enumeration and root validation."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from mlcp.library.scanner import (
    EnumerationError,
    LibraryScanner,
    PathNotFoundError,
    enumerate_library,
    require_directory,
)


def _names(entries: list) -> set[str]:
    return {e.name for e in entries}


class TestRequireDirectory:
    """Tests for require_directory."""

    def test_existing_path(self, library: Path) -> None:
        assert require_directory(library) == library

    def test_accepts_string(self, library: Path) -> None:
        assert require_directory(str(library)) == library

    def test_missing_path(self, tmp_path: Path) -> None:
        missing = tmp_path / "nope"
        with pytest.raises(PathNotFoundError, match="does not exist") as exc_info:
            require_directory(missing, "Library path")

        assert exc_info.value.path == missing
        assert str(exc_info.value) == f'Library path "{missing}" does not exist.'

    def test_empty_path(self) -> None:
        with pytest.raises(PathNotFoundError):
            require_directory("")


class TestEnumerateLibrary:
    """Tests for enumerate_library."""

    def test_flat_library(self, library: Path) -> None:
        """One entry per file; the root itself is not listed."""
        entries = enumerate_library(library)

        assert len(entries) == 4
        assert _names(entries) == {"music.mp3", "audio.au", "doc.txt", "album.jpg"}
        assert all(not e.is_dir for e in entries)

    def test_nested_library(self, nested_library: Path) -> None:
        """Directories, hidden files, forks and empty files are all listed."""
        entries = enumerate_library(nested_library)
        by_name = {e.name: e for e in entries}

        assert by_name["Artist"].is_dir is True
        assert by_name["Album [2009]"].is_dir is True
        assert by_name["._01 Track.FLAC"].is_dir is False
        assert ".DS_Store" in by_name
        assert "empty.log" in by_name
        assert by_name["artist.nfo"].path == nested_library / "Artist" / "artist.nfo"
        assert len(entries) == 10

    def test_extensions_are_lowercase(self, nested_library: Path) -> None:
        entries = enumerate_library(nested_library)
        by_name = {e.name: e for e in entries}

        assert by_name["01 Track.FLAC"].extension == "flac"
        assert by_name["Cover.JPG"].extension == "jpg"
        assert by_name["Artist"].extension == ""

    def test_files_without_extension(self, tmp_path: Path) -> None:
        (tmp_path / "README").write_text("x")

        entries = enumerate_library(tmp_path)

        assert [(e.name, e.extension) for e in entries] == [("README", "")]

    def test_empty_library(self, tmp_path: Path) -> None:
        assert enumerate_library(tmp_path) == []

    def test_order_is_stable(self, nested_library: Path) -> None:
        assert enumerate_library(nested_library) == enumerate_library(nested_library)

    def test_missing_root(self, tmp_path: Path) -> None:
        with pytest.raises(EnumerationError, match="Cannot traverse"):
            enumerate_library(tmp_path / "vanished")

    def test_root_is_a_file(self, tmp_path: Path) -> None:
        target = tmp_path / "music.mp3"
        target.write_bytes(b"x")

        with pytest.raises(EnumerationError):
            enumerate_library(target)

    def test_unreadable_directory(self, library: Path) -> None:
        """A traversal error below the root is fatal."""

        def _walk(top: object, onerror: object = None, **_kwargs: object) -> object:
            assert callable(onerror)
            onerror(PermissionError(13, "Permission denied", str(library / "locked")))
            return iter(())

        with (
            patch("mlcp.library.scanner.os.walk", _walk),
            pytest.raises(EnumerationError, match="Permission denied"),
        ):
            enumerate_library(library)

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlinked_directory_not_descended(self, library: Path, tmp_path: Path) -> None:
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "elsewhere.txt").write_text("x")
        (library / "link").symlink_to(outside, target_is_directory=True)

        entries = enumerate_library(library)
        by_name = {e.name: e for e in entries}

        assert by_name["link"].is_dir is True
        assert "elsewhere.txt" not in by_name


class TestLibraryScanner:
    """Tests for LibraryScanner."""

    def test_scan(self, library: Path) -> None:
        scanner = LibraryScanner(str(library))

        assert scanner.root == library
        assert len(scanner.scan()) == 4
