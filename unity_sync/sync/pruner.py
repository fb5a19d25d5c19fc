"""Phase 3 — remove scope directories that phase 2 left empty.

Removing the last package of a scope leaves ``@scope/`` behind, possibly
holding nothing but the .meta files of the packages that used to live there.
Such a directory counts as empty and is deleted together with its own
``@scope.meta``.
"""

from __future__ import annotations

from pathlib import Path

from unity_sync.models.package import SyncReport
from unity_sync.project.context import SyncContext
from unity_sync.reporting import SyncReporter
from unity_sync.sync.guard import validate_package_path
from unity_sync.utils.fs_ops import (
    SCOPE_PREFIX,
    is_orphan_meta,
    list_directories,
    meta_path_for,
    remove_file_if_exists,
    remove_path,
)


def list_package_scopes(packages_dir: Path) -> list[str]:
    return [d for d in list_directories(packages_dir) if d.startswith(SCOPE_PREFIX)]


def is_scope_empty(scope_dir: Path) -> bool:
    """True when *scope_dir* holds nothing but orphaned .meta files."""
    validate_package_path(scope_dir)
    return all(is_orphan_meta(item) for item in scope_dir.iterdir())


def prune_empty_scopes(
    context: SyncContext,
    reporter: SyncReporter,
    report: SyncReport,
) -> None:
    for scope in list_package_scopes(context.packages_dir):
        scope_dir = validate_package_path(context.packages_dir / scope)
        if not is_scope_empty(scope_dir):
            continue

        reporter.pruning(scope)
        remove_path(scope_dir)
        remove_file_if_exists(validate_package_path(meta_path_for(scope_dir)))
        report.pruned.append(scope)

    reporter.phase_end()
