"""Directory names treated as disposable build artifacts.

Matching is on the final path component only, exact and case-sensitive.
"""

from collections.abc import Collection

# Dependency and build output directories (npm, Composer/Go, Cargo/Maven)
ARTIFACT_DIR_NAMES: frozenset[str] = frozenset({"node_modules", "vendor", "target"})


def is_artifact_dir_name(name: str, deny_list: Collection[str] = ARTIFACT_DIR_NAMES) -> bool:
    """Check whether a directory base name is on the deny-list.

    Args:
        name: Base name of the directory (not a full path).
        deny_list: Names to match against. Defaults to ARTIFACT_DIR_NAMES.

    Returns:
        True if the name matches a deny-list entry exactly.
    """
    return name in deny_list
