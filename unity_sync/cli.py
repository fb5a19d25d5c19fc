"""unity-sync CLI — copy npm-managed packages into a Unity project."""

import click
from rich.console import Console
from rich.markup import escape

from unity_sync import __version__

console = Console(highlight=False)


@click.command()
@click.version_option(version=__version__)
@click.option(
    "--project-dir",
    "-p",
    default=".",
    type=click.Path(file_okay=False),
    help="Unity project root containing package.json (default: current directory)",
)
@click.option("--quiet", "-q", is_flag=True, help="Only print errors")
def main(project_dir: str, quiet: bool):
    """Sync packages from node_modules into Assets/Plugins/Packages.

    Packages whose package.json carries the "unity3d-package" keyword are
    copied in (or updated when the version changed). Packages no longer
    listed in package.json are removed, and scope directories left empty
    are pruned.
    """
    from unity_sync.errors import UnitySyncError
    from unity_sync.reporting import SyncReporter
    from unity_sync.sync.runner import run_sync

    reporter = SyncReporter(console, quiet=quiet)

    try:
        run_sync(project_dir, reporter)
    except (UnitySyncError, OSError) as e:
        console.print(f"[red]Sync failed:[/] {escape(str(e))}")
        raise SystemExit(1) from e


if __name__ == "__main__":
    main()
