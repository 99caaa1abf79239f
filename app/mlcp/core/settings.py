"""Persistent default settings for purge runs.

Stores the keep-policy defaults applied to every run, so frequently
used flags do not have to be repeated on the command line.

Settings are stored in ~/.config/mlcp/settings.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mlcp.core.paths import get_settings_path
from mlcp.library.models import KeepPolicy

logger = logging.getLogger(__name__)


class PurgeSettings(BaseModel):
    """Default options for purge runs.

    Command-line flags can switch these options on for a single run but
    cannot switch off an option enabled here.

    Attributes:
        keep_other_audio: Keep non-music audio files.
        keep_documents: Keep document/booklet files.
        delete_art: Purge folder-level album art.
        verbose: Print one line per file instead of a progress bar.
    """

    model_config = ConfigDict(extra="forbid")

    keep_other_audio: Annotated[bool, Field(description="Keep other (non-music) audio")] = False
    keep_documents: Annotated[bool, Field(description="Keep document/booklet files")] = False
    delete_art: Annotated[bool, Field(description="Purge folder-level album art")] = False
    verbose: Annotated[bool, Field(description="Verbose output")] = False

    def to_policy(self) -> KeepPolicy:
        """Build the keep policy these settings describe."""
        return KeepPolicy(
            keep_other_audio=self.keep_other_audio,
            keep_documents=self.keep_documents,
            delete_art=self.delete_art,
        )

    def merged(
        self,
        *,
        keep_other_audio: bool = False,
        keep_documents: bool = False,
        delete_art: bool = False,
        verbose: bool = False,
    ) -> "PurgeSettings":
        """Return a copy with the given flags switched on."""
        return PurgeSettings(
            keep_other_audio=self.keep_other_audio or keep_other_audio,
            keep_documents=self.keep_documents or keep_documents,
            delete_art=self.delete_art or delete_art,
            verbose=self.verbose or verbose,
        )


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsNotFoundError(SettingsError):
    """Raised when the settings file is not found."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""


def load_settings(path: Path | None = None) -> PurgeSettings:
    """Load settings from a TOML file.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated PurgeSettings object.

    Raises:
        SettingsNotFoundError: If the settings file doesn't exist.
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the content doesn't match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        raise SettingsNotFoundError(f"Settings not found: {settings_path}")

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return PurgeSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings content: {e}") from e


def get_settings(path: Path | None = None, *, missing_ok: bool = False) -> PurgeSettings:
    """Load settings, falling back to defaults when no file exists.

    Only the default settings file is optional. A file named explicitly
    must exist unless missing_ok is set.

    Args:
        path: Settings file named by the user. If None, uses the default path.
        missing_ok: Fall back to defaults when an explicit file is missing.

    Raises:
        SettingsNotFoundError: If an explicit settings file does not exist.
        SettingsParseError: If the settings file has invalid TOML syntax.
        SettingsError: If the settings file has invalid content.
    """
    try:
        return load_settings(path)
    except SettingsNotFoundError:
        if path is not None and not missing_ok:
            raise
        logger.debug("No settings file, using defaults")
        return PurgeSettings()


def save_settings(settings: PurgeSettings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        settings: The PurgeSettings object to save.
        path: Path to save the settings. If None, uses the default path.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()

    tmp_path: Path | None = None
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(settings.model_dump(), f)
        # os.replace() is atomic on POSIX
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    logger.debug("Saved settings to %s", settings_path)
    return settings_path
