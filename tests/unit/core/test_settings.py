"""Unit tests for persistent purge settings."""

from pathlib import Path
from unittest.mock import patch

import pytest
from mlcp.core.settings import (
    PurgeSettings,
    SettingsError,
    SettingsNotFoundError,
    SettingsParseError,
    get_settings,
    load_settings,
    save_settings,
)
from mlcp.library.models import KeepPolicy


class TestPurgeSettings:
    """Tests for the PurgeSettings model."""

    def test_defaults(self) -> None:
        settings = PurgeSettings()
        assert settings.to_policy() == KeepPolicy()
        assert settings.verbose is False

    def test_rejects_unknown_keys(self) -> None:
        with pytest.raises(ValueError):
            PurgeSettings.model_validate({"keep_video": True})

    def test_to_policy(self) -> None:
        settings = PurgeSettings(keep_other_audio=True, delete_art=True)
        assert settings.to_policy() == KeepPolicy(keep_other_audio=True, delete_art=True)

    def test_merged_switches_flags_on(self) -> None:
        settings = PurgeSettings(keep_documents=True)

        result = settings.merged(keep_other_audio=True, verbose=True)

        assert result == PurgeSettings(keep_other_audio=True, keep_documents=True, verbose=True)

    def test_merged_cannot_switch_flags_off(self) -> None:
        settings = PurgeSettings(delete_art=True)
        assert settings.merged(delete_art=False).delete_art is True


class TestLoadSettings:
    """Tests for load_settings and get_settings."""

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SettingsNotFoundError):
            load_settings(tmp_path / "settings.toml")

    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.toml"
        path.write_text("keep_other_audio = true\ndelete_art = true\n")

        settings = load_settings(path)

        assert settings.keep_other_audio is True
        assert settings.delete_art is True
        assert settings.keep_documents is False

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.toml"
        path.write_text("keep_other_audio = \n")

        with pytest.raises(SettingsParseError, match="Invalid TOML"):
            load_settings(path)

    def test_invalid_content(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.toml"
        path.write_text('delete_art = "sometimes"\nunknown = 1\n')

        with pytest.raises(SettingsError, match="Invalid settings content"):
            load_settings(path)

    def test_default_path(self, isolated_config: Path) -> None:
        path = isolated_config / "mlcp" / "settings.toml"
        path.parent.mkdir(parents=True)
        path.write_text("keep_documents = true\n")

        assert load_settings().keep_documents is True

    def test_get_settings_falls_back_to_defaults(self) -> None:
        """A missing default settings file means default settings."""
        assert get_settings() == PurgeSettings()

    def test_get_settings_requires_explicit_file(self, tmp_path: Path) -> None:
        """A settings file named explicitly must exist."""
        with pytest.raises(SettingsNotFoundError, match="missing.toml"):
            get_settings(tmp_path / "missing.toml")

    def test_get_settings_missing_ok(self, tmp_path: Path) -> None:
        assert get_settings(tmp_path / "missing.toml", missing_ok=True) == PurgeSettings()

    def test_get_settings_propagates_parse_errors(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.toml"
        path.write_text("[[[")

        with pytest.raises(SettingsParseError):
            get_settings(path)


class TestSaveSettings:
    """Tests for save_settings."""

    def test_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "settings.toml"
        settings = PurgeSettings(keep_other_audio=True, verbose=True)

        saved = save_settings(settings, path)

        assert saved == path
        assert load_settings(path) == settings

    def test_default_path(self, isolated_config: Path) -> None:
        saved = save_settings(PurgeSettings(delete_art=True))

        assert saved == isolated_config / "mlcp" / "settings.toml"
        assert "delete_art = true" in saved.read_text()

    def test_no_temp_file_left_on_failure(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.toml"

        with (
            patch("mlcp.core.settings.os.replace", side_effect=OSError("read-only")),
            pytest.raises(SettingsError, match="Failed to write settings"),
        ):
            save_settings(PurgeSettings(), path)

        assert list(tmp_path.iterdir()) == []
