"""Music library classification and purge module.

This module provides the file type catalogs, library enumeration,
keep/purge classification, and the purge/backup operator.
"""

from mlcp.library.catalog import (
    ALBUM_ART_EXTENSIONS,
    ALBUM_ART_FILENAMES,
    DOCUMENT_FILE_TYPES,
    MUSIC_FILE_TYPES,
    OTHER_AUDIO_FILE_TYPES,
    OTHER_AUDIO_KEEP_TYPES,
    build_art_keep_set,
    build_keep_extensions,
)
from mlcp.library.classifier import Classification, classify, is_resource_fork, partition
from mlcp.library.models import (
    FailureKind,
    FileEntry,
    KeepPolicy,
    KeepReason,
    OperationOutcome,
    OutcomeStatus,
    path_text,
)
from mlcp.library.operator import BackupPathError, PurgeOperator, mirror_path, process_candidate
from mlcp.library.report import PurgeReport, operation_label
from mlcp.library.scanner import (
    EnumerationError,
    LibraryError,
    LibraryScanner,
    PathNotFoundError,
    enumerate_library,
    require_directory,
)

__all__ = [
    "ALBUM_ART_EXTENSIONS",
    "ALBUM_ART_FILENAMES",
    "DOCUMENT_FILE_TYPES",
    "MUSIC_FILE_TYPES",
    "OTHER_AUDIO_FILE_TYPES",
    "OTHER_AUDIO_KEEP_TYPES",
    "BackupPathError",
    "Classification",
    "EnumerationError",
    "FailureKind",
    "FileEntry",
    "KeepPolicy",
    "KeepReason",
    "LibraryError",
    "LibraryScanner",
    "OperationOutcome",
    "OutcomeStatus",
    "PathNotFoundError",
    "PurgeOperator",
    "PurgeReport",
    "build_art_keep_set",
    "build_keep_extensions",
    "classify",
    "enumerate_library",
    "is_resource_fork",
    "mirror_path",
    "operation_label",
    "partition",
    "path_text",
    "process_candidate",
    "require_directory",
]
