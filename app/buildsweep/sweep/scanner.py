"""Directory scanner for build-artifact directories.

Walks a source tree top-down and yields every directory whose base name
is on the deny-list. Matched directories are pruned from the walk, so
nothing beneath a match is ever visited, whether or not the caller
removes it.
"""

import logging
import os
from collections.abc import Collection, Iterator
from pathlib import Path

from buildsweep.sweep.denylist import ARTIFACT_DIR_NAMES, is_artifact_dir_name

logger = logging.getLogger(__name__)


class ArtifactScanner:
    """Scans a directory tree for build-artifact directories.

    Symlinks are never followed and never reported, even when they
    point at a directory with an artifact name.

    Args:
        start_dir: Root directory of the walk.
        deny_list: Directory base names to match. Defaults to ARTIFACT_DIR_NAMES.
    """

    def __init__(
        self,
        start_dir: Path | str,
        *,
        deny_list: Collection[str] = ARTIFACT_DIR_NAMES,
    ) -> None:
        self._start_dir = Path(start_dir)
        self._deny_list = deny_list

    def scan(self) -> Iterator[str]:
        """Walk the tree and yield matched directory paths.

        Paths are joined onto the start directory as given, so a relative
        start directory yields relative paths. A start directory that does
        not exist, is not a directory, or cannot be read yields nothing.

        The walk is lazy: each directory is listed only when the walk
        reaches it, after the caller has handled every match yielded
        before it.

        Yields:
            Paths of matched directories, siblings in sorted order.
        """
        root = str(self._start_dir)

        if not self._start_dir.is_dir():
            logger.debug("Start directory is not a readable directory: %s", root)
            return

        if not self._start_dir.is_symlink() and self._matches(self._start_dir.name):
            yield root
            return

        for dirpath, dirnames, _filenames in os.walk(root, onerror=self._on_walk_error):
            dirnames.sort()
            matched: list[str] = []
            for name in dirnames:
                if not self._matches(name):
                    continue
                full_path = os.path.join(dirpath, name)
                if os.path.islink(full_path):
                    logger.debug("Skipping symlink: %s", full_path)
                    continue
                matched.append(name)

            # Prune before yielding so the walk never descends into a match
            dirnames[:] = [name for name in dirnames if name not in matched]

            for name in matched:
                yield os.path.join(dirpath, name)

    def _matches(self, name: str) -> bool:
        return is_artifact_dir_name(name, self._deny_list)

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        """Log unreadable directories and keep walking."""
        logger.warning("Cannot read directory %s: %s", error.filename, error.strerror or error)
