"""Library domain models for classification and purging.

This module defines the core data structures for representing
entries discovered in a music library, the keep policy that drives
classification, and the per-file outcome of a purge run.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePath


class KeepReason(str, Enum):
    """Reason why a library entry is kept.

    Attributes:
        DIRECTORY: Entry is a directory; directories are never purged.
        RESOURCE_FORK: Entry is a macOS resource fork ("._" prefix).
        ALBUM_ART: Entry is folder-level album art being kept.
        KEEP_EXTENSION: Entry has an extension on the keep list.
    """

    DIRECTORY = "directory"
    RESOURCE_FORK = "resource_fork"
    ALBUM_ART = "album_art"
    KEEP_EXTENSION = "keep_extension"


class OutcomeStatus(str, Enum):
    """Result of processing a single purge candidate.

    The values double as the operation tags shown to the user.
    """

    SIMULATED = "SIMULATED"
    PURGED = "PURGED"
    BACKED_UP = "BACKED-UP"
    FAILED = "ERROR"


class FailureKind(str, Enum):
    """Why processing a purge candidate failed.

    Attributes:
        DIRECTORY_CREATE_FAILED: A backup directory could not be created.
        COPY_FAILED: The backup copy could not be written.
        DELETE_FAILED: The original file could not be removed.
        BACKUP_PATH_INVALID: The file does not live under the library root.
    """

    DIRECTORY_CREATE_FAILED = "directory_create_failed"
    COPY_FAILED = "copy_failed"
    DELETE_FAILED = "delete_failed"
    BACKUP_PATH_INVALID = "backup_path_invalid"


def path_text(value: str | os.PathLike[str] | None, default: str = "") -> str:
    """Return a path component as text, or ``default`` when it is absent.

    Characters that cannot be represented (undecodable bytes smuggled in
    as surrogates) are replaced rather than raising.
    """
    if value is None:
        return default
    text = os.fspath(value)
    if not text:
        return default
    try:
        raw = text.encode("utf-8", errors="surrogateescape")
    except UnicodeEncodeError:
        raw = text.encode("utf-8", errors="surrogatepass")
    return raw.decode("utf-8", errors="replace")


def extension_of(name: str) -> str:
    """Lowercase text after the last "." of a base name ("" if none)."""
    _, dot, extension = name.rpartition(".")
    if not dot:
        return ""
    return extension.lower()


@dataclass(frozen=True, slots=True)
class FileEntry:
    """Snapshot of a filesystem entry found in the library.

    Attributes:
        path: Full path of the entry.
        name: Base name of the entry.
        extension: Lowercase extension, empty string if the name has none.
        is_dir: Whether the entry was a directory when it was visited.
    """

    path: Path
    name: str
    extension: str
    is_dir: bool

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not Path(self.path).parts:
            msg = "Path cannot be empty"
            raise ValueError(msg)

    @classmethod
    def from_path(cls, path: PurePath | str, *, is_dir: bool) -> FileEntry:
        """Build an entry, deriving name and extension from the path."""
        path = Path(path)
        name = path_text(path.name)
        return cls(path=path, name=name, extension=extension_of(name), is_dir=is_dir)


@dataclass(frozen=True, slots=True)
class KeepPolicy:
    """Which file categories survive a purge.

    Music files are always kept.

    Attributes:
        keep_other_audio: Keep audio files that are not music formats.
        keep_documents: Keep document/booklet files (txt, pdf).
        delete_art: Purge folder-level album art instead of keeping it.
    """

    keep_other_audio: bool = False
    keep_documents: bool = False
    delete_art: bool = False

    @classmethod
    def restricted(cls, *, keep_other_audio: bool = False, delete_art: bool = False) -> KeepPolicy:
        """Policy without document handling; documents are always purged."""
        return cls(keep_other_audio=keep_other_audio, keep_documents=False, delete_art=delete_art)


@dataclass(frozen=True, slots=True)
class OperationOutcome:
    """Result of processing a single purge candidate.

    Attributes:
        status: What happened to the candidate.
        path: Path of the purge candidate.
        target: Backup location written, or attempted when the copy failed.
        error: Error message if processing failed, None otherwise.
        failure: Kind of failure, None unless status is FAILED.
    """

    status: OutcomeStatus
    path: Path
    target: Path | None = None
    error: str | None = None
    failure: FailureKind | None = None

    @property
    def success(self) -> bool:
        """Whether the candidate was processed without error."""
        return self.status != OutcomeStatus.FAILED

    @property
    def failed(self) -> bool:
        """Whether processing the candidate failed."""
        return self.status == OutcomeStatus.FAILED

    @property
    def tag(self) -> str:
        """Operation tag shown to the user."""
        return self.status.value

    @classmethod
    def simulated(cls, path: Path) -> OperationOutcome:
        return cls(status=OutcomeStatus.SIMULATED, path=path)

    @classmethod
    def purged(cls, path: Path) -> OperationOutcome:
        return cls(status=OutcomeStatus.PURGED, path=path)

    @classmethod
    def backed_up(cls, path: Path, target: Path) -> OperationOutcome:
        return cls(status=OutcomeStatus.BACKED_UP, path=path, target=target)

    @classmethod
    def failed_with(
        cls,
        path: Path,
        failure: FailureKind,
        error: str,
        target: Path | None = None,
    ) -> OperationOutcome:
        return cls(
            status=OutcomeStatus.FAILED,
            path=path,
            target=target,
            error=error,
            failure=failure,
        )
