"""Phase 2 — remove installed packages that package.json no longer declares."""

from __future__ import annotations

from pathlib import Path

from unity_sync.models.package import InstalledPackage, SyncReport
from unity_sync.project.context import SyncContext
from unity_sync.reporting import SyncReporter
from unity_sync.sync.guard import validate_package_path
from unity_sync.utils.fs_ops import (
    SCOPE_PREFIX,
    list_directories,
    remove_file_if_exists,
    remove_path,
)


def list_installed_packages(packages_dir: Path) -> list[str]:
    """Names of the packages installed under *packages_dir*.

    A top-level directory is a package unless its name starts with ``@``;
    then every directory inside it is a package named ``@scope/child``.
    """
    names = []
    for directory in list_directories(packages_dir):
        if directory.startswith(SCOPE_PREFIX):
            names.extend(
                f"{directory}/{child}"
                for child in list_directories(packages_dir / directory)
            )
        else:
            names.append(directory)
    return names


def find_redundant_packages(context: SyncContext) -> list[str]:
    return [
        name
        for name in list_installed_packages(context.packages_dir)
        if name not in context.dependency_names
    ]


def remove_package(packages_dir: Path, name: str) -> None:
    """Delete an installed package directory and its .meta sidecar."""
    package = InstalledPackage(name=name, path=packages_dir / name)
    validate_package_path(package.path)
    validate_package_path(package.meta_path)

    if package.path.exists() or package.path.is_symlink():
        remove_path(package.path)

    remove_file_if_exists(package.meta_path)


def remove_redundant_packages(
    context: SyncContext,
    reporter: SyncReporter,
    report: SyncReport,
) -> None:
    for name in find_redundant_packages(context):
        reporter.removing(name)
        remove_package(context.packages_dir, name)
        report.removed.append(name)

    reporter.phase_end()
