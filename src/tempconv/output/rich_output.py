from __future__ import annotations

from typing import TYPE_CHECKING

from rich.panel import Panel
from rich.table import Table

from tempconv.history.formatting import format_relative_time
from tempconv.models.conversion import ConversionDirection

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime

    from rich.console import Console

    from tempconv.models.conversion import ConversionRecord


_DIRECTION_STYLE = {
    ConversionDirection.F_TO_C: "blue",
    ConversionDirection.C_TO_F: "red",
}


class RichOutput:
    """Rich-based terminal output helpers for *tempconv*."""

    def __init__(self, console: Console) -> None:
        self._con = console

    # ------------------------------------------------------------------
    # Conversion result
    # ------------------------------------------------------------------

    def conversion_result(self, record: ConversionRecord, summary: str | None = None) -> None:
        """Print the converted value in a panel, with an optional summary line."""
        unit = record.direction.target_unit
        body = f"[bold]{record.output_value:.2f}°{unit}[/bold]"
        if summary:
            body += f"\n{summary}"
        self._con.print(Panel(body, title="Result", expand=False))

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def history_table(self, records: Iterable[ConversionRecord], now: datetime) -> None:
        """Print conversion history newest first, or an empty-state hint."""
        rows = list(records)
        if not rows:
            self._con.print("[dim]No conversion history yet[/dim]")
            self._con.print("[dim]Perform a conversion to see history here[/dim]")
            return

        table = Table(title="Conversion History")
        table.add_column("Conversion")
        table.add_column("When", style="dim")

        for record in rows:
            style = _DIRECTION_STYLE[record.direction]
            table.add_row(
                f"[{style}]{record.display_text}[/{style}]",
                format_relative_time(record, now),
            )

        self._con.print(table)

    def direction(self, direction: ConversionDirection) -> None:
        """Print the active conversion direction."""
        self._con.print(
            f"Converting [cyan]°{direction.source_unit}[/cyan]"
            f" → [cyan]°{direction.target_unit}[/cyan]"
        )

    # ------------------------------------------------------------------
    # Command result helpers
    # ------------------------------------------------------------------

    def command_result(self, success: bool, message: str = "") -> None:
        """Print a coloured OK / FAILED indicator."""
        text = "[green]OK[/green]" if success else "[red]FAILED[/red]"
        if message:
            text += f"  {message}"
        self._con.print(text)

    def error(self, message: str) -> None:
        """Print a bold red error line."""
        self._con.print(f"[bold red]Error:[/bold red] {message}")

    def info(self, message: str) -> None:
        """Print an informational message (plain)."""
        self._con.print(message)
