"""Phase 1 — copy managed packages from node_modules into the Unity project.

A dependency is managed when its package.json lists the ``unity3d-package``
keyword. Managed packages are reinstalled from scratch whenever the installed
version string differs from the source version string; the comparison is
exact, so "1.0" and "1.0.0" count as different versions.
"""

from __future__ import annotations

from pathlib import Path

from unity_sync.models.package import DeclaredDependency, SourcePackage, SyncReport
from unity_sync.project.context import SyncContext
from unity_sync.project.manifest import read_installed_package, read_source_package
from unity_sync.reporting import SyncReporter
from unity_sync.sync.guard import validate_package_path
from unity_sync.utils.fs_ops import copy_directory_contents, copy_path, empty_directory


def install_packages(
    context: SyncContext,
    reporter: SyncReporter,
    report: SyncReport,
) -> None:
    """Install or update every managed dependency, in manifest order."""
    for dependency in context.dependencies:
        source = read_source_package(dependency.source_dir)

        # Ordinary npm dependency; nothing to copy.
        if not source.marker_present:
            report.unmanaged.append(dependency.name)
            continue

        reporter.package(dependency.name)

        target_dir = validate_package_path(context.packages_dir / dependency.name)
        installed = read_installed_package(dependency.name, target_dir)
        if installed.has_manifest and installed.version == source.version:
            reporter.up_to_date(dependency.name)
            report.up_to_date.append(dependency.name)
            continue

        install_package(dependency, source, target_dir, reporter)
        report.installed.append(dependency.name)

    reporter.phase_end()


def install_package(
    dependency: DeclaredDependency,
    source: SourcePackage,
    target_dir: Path,
    reporter: SyncReporter,
) -> None:
    """Replace *target_dir* with a fresh copy of the package's assets."""
    validate_package_path(target_dir)

    reporter.step("Preparing package directory...")
    empty_directory(target_dir)

    reporter.step("Copying asset files...")
    copy_if_exists(dependency.source_dir, target_dir, source.asset_subdir, "")

    reporter.step("Copying extra files...")
    for file_name in source.extra_files:
        copy_if_exists(dependency.source_dir, target_dir, file_name)


def copy_if_exists(
    source_dir: Path,
    target_dir: Path,
    source_relative: str,
    target_relative: str | None = None,
) -> bool:
    """Copy ``source_dir/source_relative`` into *target_dir* if it exists.

    An empty *target_relative* copies a directory's contents straight into
    *target_dir*. Returns False when the source is missing.
    """
    source_path = source_dir / source_relative
    if not source_path.exists():
        return False

    if target_relative is None:
        target_relative = source_relative

    if target_relative == "" and source_path.is_dir():
        copy_directory_contents(source_path, target_dir)
    else:
        copy_path(source_path, target_dir / target_relative)
    return True
