"""CLI entry point; registers all subcommands."""

import typer

app = typer.Typer(
    name="locscan",
    help="locscan - count code, comment and blank lines in a source tree",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .count import count as _count, main as _main_callback  # noqa: F401, E402
from .languages import languages as _languages  # noqa: F401, E402
