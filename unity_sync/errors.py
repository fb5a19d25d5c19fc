"""Error types for unity-package-sync.

Everything the sync raises on purpose derives from UnitySyncError, so the
CLI can report it and exit non-zero. Filesystem failures are left as the
builtin OSError.
"""

from __future__ import annotations

from pathlib import Path


class UnitySyncError(Exception):
    """Base class for all unity-package-sync errors."""


class ConfigurationError(UnitySyncError):
    """A manifest is missing, unreadable, or not a JSON object."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        self.path = str(path) if path is not None else None
        if self.path:
            message = f"{message}: {self.path}"
        super().__init__(message)


class UnsafePathError(UnitySyncError):
    """A path about to be deleted or inspected lies outside the packages directory."""

    def __init__(self, path: str | Path) -> None:
        self.path = str(path)
        super().__init__(f"Project package has an unexpected path: {self.path}")
