"""Unit tests for XDG path management."""

import os
from pathlib import Path
from unittest.mock import patch

from buildsweep.core.paths import (
    APP_NAME,
    DELETION_LOG_NAME,
    get_config_dir,
    get_deletion_log_path,
    get_user_theme_path,
)


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_default_config_dir(self) -> None:
        """get_config_dir returns default path when XDG_CONFIG_HOME not set."""
        with patch.dict(os.environ, {}, clear=True):
            os.environ.pop("XDG_CONFIG_HOME", None)

            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        """get_config_dir respects XDG_CONFIG_HOME environment variable."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_config_dir()

        assert result == tmp_path / APP_NAME

    def test_empty_xdg_config_home_uses_default(self) -> None:
        """An empty XDG_CONFIG_HOME falls back to ~/.config."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": ""}):
            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME


class TestFilePaths:
    """Tests for file path helpers."""

    def test_user_theme_path(self, tmp_path: Path) -> None:
        """Theme override lives in the config directory."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            assert get_user_theme_path() == tmp_path / APP_NAME / "theme.toml"

    def test_deletion_log_path_is_relative(self) -> None:
        """The deletion log resolves against the working directory."""
        result = get_deletion_log_path()

        assert result == Path(DELETION_LOG_NAME)
        assert not result.is_absolute()
        assert DELETION_LOG_NAME == "deleted_dirs_log.txt"
