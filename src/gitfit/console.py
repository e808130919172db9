"""Terminal rendering for gitfit."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gitfit.aliases import AliasRecord


class Renderer:
    """CLI renderer using Rich for terminal output."""

    def __init__(self, console: Console | None = None) -> None:
        self.console: Console = console or Console()

    def info(self, message: str) -> None:
        self.console.print(escape(message))

    def success(self, message: str) -> None:
        self.console.print(f"[bold green]✓[/bold green] {escape(message)}")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def error(self, message: str) -> None:
        """Render an error message."""
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}")

    def skipped(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.warning(f"skipped invalid line: {line}")

    def alias_table(self, records: Iterable[AliasRecord], *, title: str = "Git aliases") -> None:
        """Render aliases as ``git <name>`` next to their commands."""
        table = Table(title=title, show_header=True, header_style="bold")
        table.add_column("Alias", style="yellow", no_wrap=True)
        table.add_column("Command", overflow="fold")
        for record in records:
            table.add_row(escape(f"git {record.name}"), escape(record.command))
        self.console.print(table)
