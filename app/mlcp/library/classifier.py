"""Keep/purge classification of library entries.

Partitions the entries of a library into the ones a keep policy
preserves and the "crud" files that are candidates for purging.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from mlcp.library.catalog import build_art_keep_set, build_keep_extensions
from mlcp.library.models import FileEntry, KeepPolicy, KeepReason

logger = logging.getLogger(__name__)

# Resource fork names start with these two characters (i.e. "._")
_RES_FORK_PREFIX: tuple[str, str] = (".", "_")


@dataclass(frozen=True, slots=True)
class KeptEntry:
    """A library entry that survives the purge, and why."""

    entry: FileEntry
    reason: KeepReason


@dataclass(slots=True)
class Classification:
    """Partition of library entries into kept entries and purge candidates.

    Attributes:
        kept: Entries that are preserved, with the reason for each.
        purge: Purge candidates in enumeration order.
        extensions: Keep extensions actually present in the library.
    """

    kept: list[KeptEntry] = field(default_factory=list)
    purge: list[FileEntry] = field(default_factory=list)
    extensions: frozenset[str] = frozenset()

    def kept_by(self, reason: KeepReason) -> list[FileEntry]:
        """Kept entries for a single reason."""
        return [k.entry for k in self.kept if k.reason == reason]


def is_resource_fork(file_name: str) -> bool:
    """Check whether a file name is a macOS resource fork ("._" prefix).

    Compares code points rather than bytes, so multi-byte names are safe.

    Args:
        file_name: Base name of the file.

    Returns:
        True if the name starts with "._".
    """
    if len(file_name) < 2:
        return False
    return (file_name[0], file_name[1]) == _RES_FORK_PREFIX


def observed_keep_extensions(entries: Iterable[FileEntry], policy: KeepPolicy) -> frozenset[str]:
    """Keep extensions of the policy that actually occur in the library."""
    keep_extensions = build_keep_extensions(policy)
    return frozenset(e.extension for e in entries if e.extension in keep_extensions)


def partition(entries: Iterable[FileEntry], policy: KeepPolicy) -> Classification:
    """Split library entries into kept entries and purge candidates.

    Directories and resource forks are always kept; forks disappear with
    the file that owns them. Folder-level album art is kept unless the
    policy deletes art, then files with a keep extension are kept.
    Everything else is a purge candidate.

    Args:
        entries: Entries produced by the library scanner.
        policy: Keep policy for the run.

    Returns:
        Classification holding both sides of the partition.
    """
    entries = list(entries)
    art_files = build_art_keep_set(policy.delete_art)
    extensions = observed_keep_extensions(entries, policy)

    result = Classification(extensions=extensions)
    for entry in entries:
        reason = _keep_reason(entry, art_files, extensions)
        if reason is None:
            result.purge.append(entry)
        else:
            result.kept.append(KeptEntry(entry=entry, reason=reason))

    logger.debug(
        "Classified %d entries: %d kept, %d to purge",
        len(entries),
        len(result.kept),
        len(result.purge),
    )
    return result


def classify(entries: Iterable[FileEntry], policy: KeepPolicy) -> list[FileEntry]:
    """Return the purge candidates among library entries.

    Args:
        entries: Entries produced by the library scanner.
        policy: Keep policy for the run.

    Returns:
        Purge candidates in enumeration order.
    """
    return partition(entries, policy).purge


def _keep_reason(
    entry: FileEntry,
    art_files: frozenset[str],
    extensions: frozenset[str],
) -> KeepReason | None:
    if entry.is_dir:
        return KeepReason.DIRECTORY
    if is_resource_fork(entry.name):
        return KeepReason.RESOURCE_FORK
    if entry.name.lower() in art_files:
        return KeepReason.ALBUM_ART
    if entry.extension in extensions:
        return KeepReason.KEEP_EXTENSION
    return None
