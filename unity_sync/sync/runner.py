"""Runs the three sync phases against a project."""

from __future__ import annotations

from pathlib import Path

from unity_sync.models.package import SyncReport
from unity_sync.project.context import SyncContext, load_context
from unity_sync.reporting import SyncReporter
from unity_sync.sync.installer import install_packages
from unity_sync.sync.pruner import prune_empty_scopes
from unity_sync.sync.remover import remove_redundant_packages


def sync_project(
    context: SyncContext,
    reporter: SyncReporter | None = None,
    report: SyncReport | None = None,
) -> SyncReport:
    """Install, then remove, then prune. Each phase sees the previous one's result."""
    reporter = reporter or SyncReporter(quiet=True)
    report = report or SyncReport()

    reporter.start()
    install_packages(context, reporter, report)
    remove_redundant_packages(context, reporter, report)
    prune_empty_scopes(context, reporter, report)
    reporter.finish(report)

    return report


def run_sync(
    project_dir: str | Path = ".",
    reporter: SyncReporter | None = None,
) -> SyncReport:
    """Load the project at *project_dir* and sync it."""
    context = load_context(project_dir)
    return sync_project(context, reporter)
