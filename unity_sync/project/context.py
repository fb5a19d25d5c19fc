"""SyncContext — everything a sync run needs, resolved once up front."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from unity_sync.models.package import DeclaredDependency
from unity_sync.project.manifest import dependency_names, read_manifest
from unity_sync.sync.guard import PROJECT_RELATIVE_PACKAGES_PATH

MANIFEST_FILE = "package.json"
NODE_MODULES_DIR = "node_modules"


@dataclass(frozen=True)
class SyncContext:
    """Resolved paths and the declared dependency set for one project."""

    project_dir: Path
    packages_dir: Path
    node_modules_dir: Path
    dependencies: tuple[DeclaredDependency, ...] = ()
    dependency_names: frozenset[str] = field(init=False)

    def __post_init__(self):
        object.__setattr__(
            self, "dependency_names", frozenset(d.name for d in self.dependencies)
        )


def load_context(project_dir: str | Path = ".") -> SyncContext:
    """Read the project's package.json and resolve the sync paths.

    Raises:
        ConfigurationError: package.json is missing or malformed.
    """
    project_dir = Path(project_dir).resolve()
    manifest_path = project_dir / MANIFEST_FILE
    manifest = read_manifest(manifest_path)
    node_modules_dir = project_dir / NODE_MODULES_DIR

    dependencies = tuple(
        DeclaredDependency(name=name, source_dir=node_modules_dir / name)
        for name in dependency_names(manifest, manifest_path)
    )

    return SyncContext(
        project_dir=project_dir,
        packages_dir=project_dir / PROJECT_RELATIVE_PACKAGES_PATH,
        node_modules_dir=node_modules_dir,
        dependencies=dependencies,
    )
