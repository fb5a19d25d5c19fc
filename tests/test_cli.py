"""Tests for the unity-sync command line."""

import json
import tempfile
from pathlib import Path

from click.testing import CliRunner

from unity_sync import __version__
from unity_sync.cli import main


def _write_project(root: Path, dependencies: dict) -> None:
    (root / "package.json").write_text(json.dumps({"dependencies": dependencies}))


def test_sync_succeeds():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        source_dir = root / "node_modules" / "lib"
        (source_dir / "assets").mkdir(parents=True)
        (source_dir / "assets" / "Lib.cs").write_text("// lib")
        (source_dir / "package.json").write_text(
            json.dumps({"version": "1.0.0", "keywords": ["unity3d-package"]})
        )
        _write_project(root, {"lib": "^1.0.0"})

        result = CliRunner().invoke(main, ["--project-dir", tmpdir])

        assert result.exit_code == 0, result.output
        assert "Syncing packages" in result.output
        assert (root / "Assets" / "Plugins" / "Packages" / "lib" / "Lib.cs").exists()


def test_quiet_flag():
    with tempfile.TemporaryDirectory() as tmpdir:
        _write_project(Path(tmpdir), {})
        result = CliRunner().invoke(main, ["-p", tmpdir, "--quiet"])
        assert result.exit_code == 0
        assert result.output == ""


def test_defaults_to_current_directory():
    runner = CliRunner()
    with runner.isolated_filesystem():
        _write_project(Path("."), {})
        result = runner.invoke(main, [])
        assert result.exit_code == 0


def test_missing_manifest_exits_non_zero():
    with tempfile.TemporaryDirectory() as tmpdir:
        result = CliRunner().invoke(main, ["-p", tmpdir])
        assert result.exit_code == 1
        assert "Sync failed" in result.output


def test_missing_dependency_source_exits_non_zero():
    with tempfile.TemporaryDirectory() as tmpdir:
        _write_project(Path(tmpdir), {"not-installed": "*"})
        result = CliRunner().invoke(main, ["-p", tmpdir])
        assert result.exit_code == 1


def test_version_option():
    result = CliRunner().invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
