"""Core data models for package synchronization.

Covers: declared dependencies, the metadata each source package ships,
packages already installed into the Unity project, and the report that
accumulates over a run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from unity_sync.utils.fs_ops import meta_path_for

# Keyword that opts an npm package into being copied into the Unity project.
MARKER_KEYWORD = "unity3d-package"

# Directory inside a source package whose contents become the installed package.
ASSETS_SUBDIR = "assets"

# Top-level files copied alongside the assets when the source has them.
EXTRA_FILES = ("package.json", "README.md", "LICENSE")


# --- Declared ---


@dataclass(frozen=True)
class DeclaredDependency:
    """A dependency listed in the project's package.json."""

    name: str  # "foo" or "@scope/foo"
    source_dir: Path


@dataclass(frozen=True)
class SourcePackage:
    """Metadata read from a dependency's own package.json."""

    version: str | None = None
    keywords: tuple[str, ...] = ()
    asset_subdir: str = ASSETS_SUBDIR
    extra_files: tuple[str, ...] = EXTRA_FILES

    @property
    def marker_present(self) -> bool:
        return MARKER_KEYWORD in self.keywords


# --- Installed ---


@dataclass(frozen=True)
class InstalledPackage:
    """A package directory found under Assets/Plugins/Packages."""

    name: str
    path: Path
    version: str | None = None
    has_manifest: bool = False  # a package.json was copied in with the assets

    @property
    def meta_path(self) -> Path:
        return meta_path_for(self.path)


# --- Report ---


@dataclass
class SyncReport:
    """What a sync run did, phase by phase."""

    installed: list[str] = field(default_factory=list)
    up_to_date: list[str] = field(default_factory=list)
    unmanaged: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    pruned: list[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.installed or self.removed or self.pruned)

    def summary(self) -> str:
        return (
            f"{len(self.installed)} installed, "
            f"{len(self.up_to_date)} up to date, "
            f"{len(self.removed)} removed, "
            f"{len(self.pruned)} empty scopes pruned"
        )
