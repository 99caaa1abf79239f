"""Purge and backup operator.

Handles removal of purge candidates with simulate (dry-run) support
and optional backup into a mirrored folder structure. Failures are
isolated per file and reported as outcomes.
"""

import logging
import shutil
from collections.abc import Iterable, Iterator
from pathlib import Path

from mlcp.library.models import FailureKind, FileEntry, OperationOutcome

logger = logging.getLogger(__name__)


class BackupPathError(Exception):
    """Raised when a file cannot be mapped into the backup root."""


def mirror_path(path: Path, library_root: Path, backup_root: Path) -> Path:
    """Map a library file to its location under the backup root.

    The library root prefix is stripped and the remaining relative path
    is joined onto the backup root, so ``library/sub/x.au`` becomes
    ``backup/sub/x.au``.

    Args:
        path: File inside the library.
        library_root: Library root the file was enumerated from.
        backup_root: Root of the backup tree.

    Returns:
        Target path for the backup copy.

    Raises:
        BackupPathError: If the file is not below the library root.
    """
    try:
        relative = Path(path).relative_to(library_root)
    except ValueError as e:
        msg = f"{path} is not inside library root {library_root}"
        raise BackupPathError(msg) from e
    if not relative.parts:
        msg = f"Cannot back up the library root itself: {path}"
        raise BackupPathError(msg)
    return Path(backup_root) / relative


class PurgeOperator:
    """Purges, or backs up then purges, library files.

    Nothing on disk changes unless ``purge`` is set. A backup root on its
    own does not copy anything; backups only happen as part of a purge.

    Attributes:
        _library_root: Root the candidates were enumerated from.
        _backup_root: Root of the backup tree, None if backups are off.
        _purge: If False, simulate every operation.
    """

    def __init__(
        self,
        library_root: str | Path,
        backup_root: str | Path | None = None,
        *,
        purge: bool = False,
    ) -> None:
        """Initialize the PurgeOperator.

        Args:
            library_root: Library root the candidates were enumerated from.
            backup_root: Root of the backup tree. If None, files are deleted
                without a backup.
            purge: If True, modify the filesystem; otherwise simulate.
        """
        self._library_root = Path(library_root)
        self._backup_root = Path(backup_root) if backup_root is not None else None
        self._purge = purge

    @property
    def backup_enabled(self) -> bool:
        """Whether a backup root was given."""
        return self._backup_root is not None

    @property
    def purge_enabled(self) -> bool:
        """Whether the filesystem is actually modified."""
        return self._purge

    def process_all(self, candidates: Iterable[FileEntry]) -> Iterator[OperationOutcome]:
        """Process purge candidates one at a time.

        Yields:
            One OperationOutcome per candidate, as soon as it completes.
        """
        for candidate in candidates:
            yield self.process(candidate)

    def process(self, candidate: FileEntry) -> OperationOutcome:
        """Process a single purge candidate.

        Args:
            candidate: File to purge.

        Returns:
            OperationOutcome describing what happened.
        """
        path = candidate.path

        if not self._purge:
            logger.debug("Simulate: would purge %s", path)
            return OperationOutcome.simulated(path)

        target: Path | None = None
        if self._backup_root is not None:
            try:
                target = mirror_path(path, self._library_root, self._backup_root)
            except BackupPathError as e:
                logger.warning("%s", e)
                return OperationOutcome.failed_with(path, FailureKind.BACKUP_PATH_INVALID, str(e))

            failure = self._backup(path, target)
            if failure is not None:
                return failure

        try:
            path.unlink()
        except OSError as e:
            logger.warning("Could not purge %s: %s", path, e)
            return OperationOutcome.failed_with(
                path, FailureKind.DELETE_FAILED, f"Could not purge: {e}", target=target
            )

        if target is not None:
            logger.info("Backed up %s -> %s", path, target)
            return OperationOutcome.backed_up(path, target)

        logger.info("Purged %s", path)
        return OperationOutcome.purged(path)

    def _backup(self, path: Path, target: Path) -> OperationOutcome | None:
        """Copy a file to its backup location.

        Copies rather than moves, since the backup root may be on a
        different volume than the library.

        Returns:
            A failed OperationOutcome, or None if the copy succeeded.
        """
        target_dir = target.parent
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning("Could not create target directory %s: %s", target_dir, e)
            return OperationOutcome.failed_with(
                path,
                FailureKind.DIRECTORY_CREATE_FAILED,
                f"Could not create target directory {target_dir}: {e}",
                target=target,
            )

        try:
            shutil.copy2(path, target)
        except OSError as e:
            logger.warning("Could not backup %s -> %s: %s", path, target, e)
            return OperationOutcome.failed_with(
                path,
                FailureKind.COPY_FAILED,
                f"Could not backup to {target}: {e}",
                target=target,
            )
        return None


def process_candidate(
    candidate: FileEntry,
    library_root: str | Path,
    backup_root: str | Path | None,
    backup_enabled: bool,
    purge_enabled: bool,
) -> OperationOutcome:
    """Process one purge candidate without keeping an operator around.

    Args:
        candidate: File to purge.
        library_root: Library root the candidate was enumerated from.
        backup_root: Root of the backup tree.
        backup_enabled: Whether to back the file up before purging.
        purge_enabled: Whether to modify the filesystem at all.

    Returns:
        OperationOutcome describing what happened.
    """
    operator = PurgeOperator(
        library_root,
        backup_root if backup_enabled else None,
        purge=purge_enabled,
    )
    return operator.process(candidate)
