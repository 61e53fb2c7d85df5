"""XDG-compliant path management for buildsweep.

buildsweep keeps no state between runs; the only per-user file it reads
is an optional theme override under the XDG config directory.

XDG default:
- Config: ~/.config/buildsweep/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "buildsweep"

# Deletion log written to the working directory after a committing run
DELETION_LOG_NAME = "deleted_dirs_log.txt"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/buildsweep/ (or XDG_CONFIG_HOME/buildsweep/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_user_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/buildsweep/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def get_deletion_log_path() -> Path:
    """Get the default deletion log path.

    The path is relative, so it resolves against the working directory
    at the time the log is written.

    Returns:
        Path to deleted_dirs_log.txt.
    """
    return Path(DELETION_LOG_NAME)
