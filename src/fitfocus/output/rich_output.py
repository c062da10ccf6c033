from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape

if TYPE_CHECKING:
    from pathlib import Path

    from rich.console import Console

    from fitfocus.models.focus import FocusSnapshot


class RichOutput:
    """Rich-based terminal output helpers for *fitfocus*."""

    def __init__(self, console: Console, err_console: Console) -> None:
        self._con = console
        self._err = err_console

    # ------------------------------------------------------------------
    # Playback progress
    # ------------------------------------------------------------------

    def playback_started(self, name: str, output: Path, index: int, total: int) -> None:
        """Announce the start of one input unit."""
        self._con.print(
            f"[bold]Playing[/bold] {escape(name)} ({index}/{total})"
            f" -> [cyan]{escape(str(output))}[/cyan]",
            soft_wrap=True,
        )

    def sample(self, snapshot: FocusSnapshot) -> None:
        """Print one line summarising a written snapshot."""
        self._con.print(
            f"  t={snapshot.time:<6d} power={snapshot.power}W hr={snapshot.heartrate}"
            f" cad={snapshot.cadence} speed={snapshot.speed} dist={snapshot.distance}m"
            f" height={snapshot.height} slope={snapshot.slope}",
            soft_wrap=True,
            highlight=False,
        )

    def playback_finished(self, name: str, count: int) -> None:
        self._con.print(f"[green]Done[/green] {escape(name)}: {count} samples", soft_wrap=True)

    # ------------------------------------------------------------------
    # Generic helpers
    # ------------------------------------------------------------------

    def error(self, message: str) -> None:
        """Print a bold red error line on stderr."""
        self._err.print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True)

    def info(self, message: str) -> None:
        """Print an informational message (plain)."""
        self._con.print(message, soft_wrap=True)
