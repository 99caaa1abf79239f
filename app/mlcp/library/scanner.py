"""Music library scanner.

Walks a library root recursively and snapshots every file and
directory below it as a FileEntry. Also validates the library and
backup roots before a run starts.
"""

import logging
import os
from pathlib import Path

from mlcp.library.models import FileEntry

logger = logging.getLogger(__name__)


class LibraryError(Exception):
    """Base exception for library scanning errors."""


class PathNotFoundError(LibraryError):
    """Raised when the library or backup root does not exist."""

    def __init__(self, path: Path, label: str = "Path") -> None:
        self.path = path
        self.label = label
        super().__init__(f'{label} "{path}" does not exist.')


class EnumerationError(LibraryError):
    """Raised when the library cannot be traversed."""


def require_directory(path: str | Path, label: str = "Path") -> Path:
    """Ensure a root path exists before any processing starts.

    Args:
        path: Library or backup root.
        label: Human-readable name used in the error message.

    Returns:
        The path as a Path.

    Raises:
        PathNotFoundError: If the path does not exist.
    """
    root = Path(path)
    if not str(path) or not root.exists():
        raise PathNotFoundError(root, label)
    return root


def enumerate_library(root: str | Path) -> list[FileEntry]:
    """Snapshot every file and directory below a library root.

    Hidden and zero-length files are included; the root itself is not.
    Entries are returned top-down with siblings sorted by name, but
    callers should not depend on the order.

    Args:
        root: Library root to walk.

    Returns:
        One FileEntry per file or directory found.

    Raises:
        EnumerationError: If the root or a directory below it cannot be read.
    """
    root_path = Path(root)
    if not root_path.is_dir():
        msg = f"Cannot traverse library root: {root_path}"
        raise EnumerationError(msg)

    def _raise(error: OSError) -> None:
        msg = f"Cannot traverse {error.filename or root_path}: {error.strerror or error}"
        raise EnumerationError(msg) from error

    entries: list[FileEntry] = []
    for dirpath, dirnames, filenames in os.walk(root_path, onerror=_raise):
        dirnames.sort()
        current = Path(dirpath)
        for name in dirnames:
            entries.append(FileEntry.from_path(current / name, is_dir=True))
        # Symlinked directories are listed in dirnames but not descended into
        for name in sorted(filenames):
            entries.append(FileEntry.from_path(current / name, is_dir=False))

    logger.debug("Enumerated %d entries under %s", len(entries), root_path)
    return entries


class LibraryScanner:
    """Enumerates the entries of a single music library.

    Args:
        root: Library root directory.
    """

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        """Library root being scanned."""
        return self._root

    def scan(self) -> list[FileEntry]:
        """Enumerate the library.

        Raises:
            EnumerationError: If the library cannot be traversed.
        """
        return enumerate_library(self._root)
