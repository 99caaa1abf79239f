"""XDG-compliant path management for mlcp.

mlcp keeps its settings and theme under the XDG config directory,
~/.config/mlcp/ by default (or $XDG_CONFIG_HOME/mlcp/).
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "mlcp"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/mlcp/ (or XDG_CONFIG_HOME/mlcp/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_settings_path() -> Path:
    """Get the default settings file path.

    Returns:
        Path to ~/.config/mlcp/settings.toml.
    """
    return get_config_dir() / "settings.toml"


def get_theme_path() -> Path:
    """Get the user theme file path.

    Returns:
        Path to ~/.config/mlcp/theme.toml.
    """
    return get_config_dir() / "theme.toml"
