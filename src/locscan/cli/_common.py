"""Shared CLI helpers."""

from typing import NoReturn, Optional, Sequence

import typer
from rich.console import Console
from rich.markup import escape

from ..exceptions import LocscanError

console = Console()
err_console = Console(stderr=True)


def as_list(values: Optional[Sequence[str]]) -> Optional[list[str]]:
    """Repeated CLI options arrive as a tuple or None; unset means no override."""
    if not values:
        return None
    return list(values)


def fail(error: LocscanError, code: int = 1) -> NoReturn:
    """Print ``error`` to stderr and exit with ``code``."""
    err_console.print(f"[red bold]Error:[/red bold] {escape(str(error))}")
    raise typer.Exit(code)
