"""Filesystem operations — listing, clearing, copying and removing package trees."""

from __future__ import annotations

import shutil
from pathlib import Path

# Directories whose name starts with this hold scoped packages ("@scope/name").
SCOPE_PREFIX = "@"

# Unity writes one of these next to every asset file and directory.
META_SUFFIX = ".meta"


def list_directories(path: Path) -> list[str]:
    """Return the names of the subdirectories of *path*, sorted.

    Symlinks to directories count as directories. A missing *path* has no
    subdirectories.
    """
    if not path.is_dir():
        return []
    return sorted(item.name for item in path.iterdir() if item.is_dir())


def meta_path_for(path: Path) -> Path:
    """Return the sidecar .meta path Unity keeps next to *path*."""
    return path.with_name(path.name + META_SUFFIX)


def is_orphan_meta(path: Path) -> bool:
    """True for a .meta file whose companion asset no longer exists."""
    if not path.name.endswith(META_SUFFIX) or not path.is_file():
        return False
    companion = path.with_name(path.name[: -len(META_SUFFIX)])
    return not companion.exists() and not companion.is_symlink()


def empty_directory(path: Path) -> None:
    """Make sure *path* exists as a real directory and contains nothing.

    A symlink at *path* is unlinked and replaced, never emptied through.
    """
    if path.is_symlink():
        path.unlink()
    if not path.exists():
        path.mkdir(parents=True)
        return
    for item in path.iterdir():
        remove_path(item)


def copy_path(source: Path, target: Path) -> None:
    """Copy a file or directory tree, merging into an existing target directory."""
    if source.is_dir():
        shutil.copytree(source, target, dirs_exist_ok=True)
    else:
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, target)


def copy_directory_contents(source: Path, target: Path) -> None:
    """Copy everything inside *source* into *target*."""
    target.mkdir(parents=True, exist_ok=True)
    for item in sorted(source.iterdir()):
        copy_path(item, target / item.name)


def remove_path(path: Path) -> None:
    """Remove a file, symlink or directory tree.

    A symlink is unlinked rather than followed.
    """
    if path.is_symlink() or not path.is_dir():
        path.unlink()
    else:
        shutil.rmtree(path)


def remove_file_if_exists(path: Path) -> bool:
    """Unlink a single file. Returns True if something was removed."""
    if path.is_file() or path.is_symlink():
        path.unlink()
        return True
    return False
