"""Reading package.json files.

The project manifest supplies the declared dependency names; each source
package's manifest supplies its version and keywords. Installed packages
carry a copy of their package.json, which is where the installed version
comes from.
"""

from __future__ import annotations

import json
from pathlib import Path

from unity_sync.errors import ConfigurationError
from unity_sync.models.package import InstalledPackage, SourcePackage


def read_manifest(path: str | Path) -> dict:
    """Load a package.json file as a dict.

    Raises:
        ConfigurationError: The file is missing, unreadable, not JSON, or
            not a JSON object.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError("Manifest not found", path)

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Manifest is not valid JSON ({e})", path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Manifest could not be read ({e})", path) from e

    if not isinstance(data, dict):
        raise ConfigurationError("Manifest must contain a JSON object", path)
    return data


def dependency_names(manifest: dict, path: str | Path | None = None) -> list[str]:
    """Names under ``dependencies`` in declaration order. Ranges are ignored."""
    dependencies = manifest.get("dependencies") or {}
    if not isinstance(dependencies, dict):
        raise ConfigurationError("'dependencies' must be an object", path)
    return list(dependencies.keys())


def read_source_package(source_dir: Path) -> SourcePackage:
    """Read the package.json shipped inside a dependency's source directory."""
    data = read_manifest(source_dir / "package.json")
    keywords = data.get("keywords") or []
    if not isinstance(keywords, list):
        keywords = []

    return SourcePackage(
        version=_version_of(data),
        keywords=tuple(k for k in keywords if isinstance(k, str)),
    )


def read_installed_package(name: str, package_dir: Path) -> InstalledPackage:
    """Describe a package directory in the Unity project.

    ``has_manifest`` is False when the directory (or its package.json) does
    not exist yet.
    """
    manifest_path = package_dir / "package.json"
    if not manifest_path.exists():
        return InstalledPackage(name=name, path=package_dir)
    return InstalledPackage(
        name=name,
        path=package_dir,
        version=_version_of(read_manifest(manifest_path)),
        has_manifest=True,
    )


def _version_of(data: dict) -> str | None:
    version = data.get("version")
    return version if isinstance(version, str) else None
