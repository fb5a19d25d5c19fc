"""Path safety guard for destructive operations.

Every directory the sync clears, deletes or checks for emptiness must sit
under the project's packages directory. The check is a plain substring test
against the hard-coded relative path, so a corrupted manifest or a bad path
computation can never reach outside Assets/Plugins/Packages.
"""

from __future__ import annotations

import os
from pathlib import Path

from unity_sync.errors import UnsafePathError

# DO NOT derive this from configuration: it is the safety net itself.
PROJECT_RELATIVE_PACKAGES_PATH = os.path.join("Assets", "Plugins", "Packages")


def canonical_path(path: str | Path) -> str:
    """Absolute, normalized form of *path* (``..`` segments collapsed)."""
    return os.path.abspath(os.fspath(path))


def is_safe_package_path(path: str | Path) -> bool:
    return PROJECT_RELATIVE_PACKAGES_PATH in canonical_path(path)


def validate_package_path(path: str | Path) -> Path:
    """Raise UnsafePathError unless *path* lies under the packages directory."""
    if not is_safe_package_path(path):
        raise UnsafePathError(canonical_path(path))
    return Path(path)
