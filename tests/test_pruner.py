"""Tests for phase 3: pruning empty scope directories."""

import json
import tempfile
from pathlib import Path

import pytest

from unity_sync.errors import UnsafePathError
from unity_sync.models.package import SyncReport
from unity_sync.project.context import SyncContext, load_context
from unity_sync.reporting import SyncReporter
from unity_sync.sync.pruner import is_scope_empty, list_package_scopes, prune_empty_scopes


def _packages_dir(root: Path) -> Path:
    return root / "Assets" / "Plugins" / "Packages"


def _write_project(root: Path, *names: str) -> None:
    (root / "package.json").write_text(
        json.dumps({"dependencies": {name: "*" for name in names}})
    )


def _prune(root: Path) -> SyncReport:
    report = SyncReport()
    prune_empty_scopes(load_context(root), SyncReporter(quiet=True), report)
    return report


def test_list_package_scopes():
    with tempfile.TemporaryDirectory() as tmpdir:
        packages = _packages_dir(Path(tmpdir))
        (packages / "@b").mkdir(parents=True)
        (packages / "@a").mkdir()
        (packages / "plain").mkdir()
        (packages / "@file.meta").write_text("meta")

        assert list_package_scopes(packages) == ["@a", "@b"]


def test_empty_scope_is_pruned_with_meta():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        _write_project(root)
        packages = _packages_dir(root)
        (packages / "@org").mkdir(parents=True)
        (packages / "@org.meta").write_text("guid: 1")

        report = _prune(root)

        assert report.pruned == ["@org"]
        assert not (packages / "@org").exists()
        assert not (packages / "@org.meta").exists()


def test_scope_with_package_is_kept():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        _write_project(root, "@org/bar")
        packages = _packages_dir(root)
        (packages / "@org" / "bar").mkdir(parents=True)
        (packages / "@org.meta").write_text("guid: 1")

        report = _prune(root)

        assert report.pruned == []
        assert (packages / "@org" / "bar").is_dir()
        assert (packages / "@org.meta").exists()


def test_scope_holding_only_orphan_meta_counts_as_empty():
    with tempfile.TemporaryDirectory() as tmpdir:
        packages = _packages_dir(Path(tmpdir))
        scope = packages / "@org"
        scope.mkdir(parents=True)
        (scope / "foo.meta").write_text("guid: 2")

        assert is_scope_empty(scope)

        (scope / "bar").mkdir()
        (scope / "bar.meta").write_text("guid: 3")
        assert not is_scope_empty(scope)


def test_scope_with_other_file_is_not_empty():
    with tempfile.TemporaryDirectory() as tmpdir:
        scope = _packages_dir(Path(tmpdir)) / "@org"
        scope.mkdir(parents=True)
        (scope / "notes.txt").write_text("keep me")

        assert not is_scope_empty(scope)


def test_unscoped_empty_directory_is_left_alone():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        _write_project(root)
        (_packages_dir(root) / "empty").mkdir(parents=True)

        report = _prune(root)
        assert report.pruned == []
        assert (_packages_dir(root) / "empty").is_dir()


def test_unsafe_scope_dir_is_refused():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        _write_project(root)
        unsafe_dir = root / "Elsewhere"
        (unsafe_dir / "@org").mkdir(parents=True)

        loaded = load_context(root)
        context = SyncContext(
            project_dir=loaded.project_dir,
            packages_dir=unsafe_dir,
            node_modules_dir=loaded.node_modules_dir,
        )

        with pytest.raises(UnsafePathError):
            prune_empty_scopes(context, SyncReporter(quiet=True), SyncReport())
        assert (unsafe_dir / "@org").is_dir()

        with pytest.raises(UnsafePathError):
            is_scope_empty(unsafe_dir / "@org")
