"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest

ARTIFACT_NAMES = ("node_modules", "vendor", "target")


def _make_dir(path: Path) -> Path:
    """Create a directory containing a single file."""
    path.mkdir(parents=True, exist_ok=True)
    (path / "test_file.txt").write_text("content")
    return path


@pytest.fixture
def artifact_tree(tmp_path: Path) -> Path:
    """Tree with one directory per artifact name plus one that must survive.

    root/
        node_modules/test_file.txt
        should_remain/test_file.txt
        target/test_file.txt
        vendor/test_file.txt
    """
    root = tmp_path / "root"
    for name in (*ARTIFACT_NAMES, "should_remain"):
        _make_dir(root / name)
    return root


@pytest.fixture
def work_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Separate working directory so the deletion log lands outside the tree."""
    cwd = tmp_path / "cwd"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd
