"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def library(tmp_path: Path) -> Path:
    """Library with one file each for the music, audio, document and art categories."""
    root = tmp_path / "library"
    root.mkdir()
    (root / "music.mp3").write_bytes(b"ID3 music")
    (root / "audio.au").write_bytes(b".snd audio")
    (root / "doc.txt").write_text("liner notes")
    (root / "album.jpg").write_bytes(b"\xff\xd8\xff art")
    return root


@pytest.fixture
def nested_library(tmp_path: Path) -> Path:
    """Library with artist/album folders, resource forks and hidden files."""
    root = tmp_path / "nested"
    album = root / "Artist" / "Album [2009]"
    album.mkdir(parents=True)
    (album / "01 Track.FLAC").write_bytes(b"fLaC")
    (album / "._01 Track.FLAC").write_bytes(b"fork")
    (album / "Cover.JPG").write_bytes(b"art")
    (album / "booklet.pdf").write_bytes(b"%PDF")
    (album / "playlist.m3u").write_text("01 Track.FLAC")
    (album / ".DS_Store").write_bytes(b"")
    (album / "empty.log").touch()
    (root / "Artist" / "artist.nfo").write_text("info")
    return root


@pytest.fixture
def backup_root(tmp_path: Path) -> Path:
    """Empty backup root directory."""
    root = tmp_path / "backup"
    root.mkdir()
    return root
