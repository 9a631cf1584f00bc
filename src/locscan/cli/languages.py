"""List the built-in marker presets."""

from rich.markup import escape
from rich.table import Table

from ..scanning.languages import PRESETS
from . import app
from ._common import console


@app.command()
def languages():
    """Show the comment marker presets and their extensions."""
    table = Table(title="[bold cyan]Comment marker presets[/bold cyan]")
    table.add_column("Language", style="bold")
    table.add_column("Extensions")
    table.add_column("Line")
    table.add_column("Block")

    for name in sorted(PRESETS):
        preset = PRESETS[name]
        m = preset.markers
        block = f"{m.block_start} ... {m.block_end}" if m.has_block else "-"
        table.add_row(
            name,
            " ".join(f".{ext}" for ext in preset.extensions),
            escape(" ".join(m.line_markers)) or "-",
            escape(block),
        )

    console.print(table)
