"""Rich terminal formatter for locscan."""

import io
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .base import BaseFormatter
from ..scanning.models import ScanResult


def _share(part: int, total: int) -> str:
    if total == 0:
        return "[dim]-[/dim]"
    return f"{100.0 * part / total:.1f}%"


class RichFormatter(BaseFormatter):
    """Table of per-file counts with a totals footer."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, result: ScanResult) -> None:
        self.console.print(self.build_table(result))
        if result.skipped:
            self.console.print()
            self.console.print(
                f"[yellow]Skipped {len(result.skipped)} unreadable file(s):[/yellow]"
            )
            for s in result.skipped:
                self.console.print(f"  [dim]{escape(s.path)}[/dim]: {escape(s.reason)}")

    def format(self, result: ScanResult) -> str:
        # Record what render() would print, without styling
        console = Console(record=True, width=120, file=io.StringIO())
        RichFormatter(console).render(result)
        return console.export_text()

    def build_table(self, result: ScanResult) -> Table:
        agg = result.aggregate
        table = Table(
            title=f"[bold cyan]{agg.file_count} '.{result.extension}' files[/bold cyan]",
            show_footer=True,
        )
        table.add_column("#", justify="right", style="dim", footer="")
        table.add_column("File", footer="[bold]Total[/bold]")
        table.add_column("Code", justify="right", style="green", footer=str(agg.code_lines))
        table.add_column("Comment", justify="right", style="blue", footer=str(agg.comment_lines))
        table.add_column("Blank", justify="right", style="dim", footer=str(agg.blank_lines))
        table.add_column("Total", justify="right", footer=str(agg.total_lines))
        table.add_column(
            "Code %", justify="right", footer=_share(agg.code_lines, agg.total_lines)
        )

        for index, r in enumerate(result.reports, start=1):
            table.add_row(
                str(index),
                escape(r.path),
                str(r.code_lines),
                str(r.comment_lines),
                str(r.blank_lines),
                str(r.total_lines),
                _share(r.code_lines, r.total_lines),
            )
        return table
