"""Console progress output for a sync run."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from unity_sync.models.package import SyncReport


class SyncReporter:
    """Prints phase-by-phase progress.

    Pass ``quiet=True`` to silence everything, or hand in your own Console
    (e.g. one writing to a StringIO) to capture the output.
    """

    def __init__(self, console: Console | None = None, quiet: bool = False):
        self.console = console or Console(highlight=False)
        self.quiet = quiet

    def _print(self, message: str = "") -> None:
        if not self.quiet:
            self.console.print(message)

    # -- run ----------------------------------------------------------------

    def start(self) -> None:
        self._print("Syncing packages in Unity project...")

    def phase_end(self) -> None:
        self._print()

    def finish(self, report: SyncReport) -> None:
        self._print(f"[green]Done.[/] {report.summary()}")

    # -- phase 1 ------------------------------------------------------------

    def package(self, name: str) -> None:
        self._print()
        self._print(f"[cyan]  {escape(name)}[/]")

    def up_to_date(self, name: str) -> None:
        self._print("    Already latest version.")

    def step(self, message: str) -> None:
        self._print(f"    {message}")

    # -- phase 2 & 3 --------------------------------------------------------

    def removing(self, name: str) -> None:
        self._print(f"[red]  Removing {escape(name)}[/]")

    def pruning(self, scope: str) -> None:
        self._print(f"[dim]  Pruning empty scope {escape(scope)}[/]")
