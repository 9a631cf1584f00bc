"""Main counting command."""

from pathlib import Path
from typing import List, Optional

import click
import typer

from ..config import load_config
from ..exceptions import ConfigurationError, ScanAbortedError
from ..formatters import get_formatter
from ..logging_config import setup_logging
from ..scanning import LineScanner
from . import app
from ._common import as_list, console, fail


@app.callback(invoke_without_command=True, no_args_is_help=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Count code, comment and blank lines in a source tree.
    """
    if version:
        from .. import __version__

        console.print(f"[bold cyan]locscan[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)


@app.command()
def count(
    root: Path = typer.Argument(
        ...,
        help="Directory to scan recursively",
    ),
    extension: str = typer.Argument(
        ...,
        help="File extension to count, e.g. rb or .rb (case-sensitive)",
    ),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        "-l",
        help="Marker preset (see `locscan languages`); default: chosen from the extension",
    ),
    line_marker: Optional[List[str]] = typer.Option(
        None,
        "--line-marker",
        "-m",
        help="Line comment token; repeat for several",
    ),
    block_start: Optional[str] = typer.Option(
        None,
        "--block-start",
        help="Token opening a comment block",
    ),
    block_end: Optional[str] = typer.Option(
        None,
        "--block-end",
        help="Token closing a comment block",
    ),
    exclude: Optional[List[str]] = typer.Option(
        None,
        "--exclude",
        "-x",
        help="Skip files whose path contains this text; repeat for several (default: /spec/)",
    ),
    exclude_glob: Optional[List[str]] = typer.Option(
        None,
        "--exclude-glob",
        help="Skip files matching this glob pattern; repeat for several",
    ),
    fmt: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: text (default), rich, json, csv",
        click_type=click.Choice(["text", "rich", "json", "csv"], case_sensitive=False),
    ),
    on_error: Optional[str] = typer.Option(
        None,
        "--on-error",
        help="Unreadable files: skip and report them (default), or abort",
        click_type=click.Choice(["skip", "abort"], case_sensitive=False),
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every file as it is counted",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
        dir_okay=False,
    ),
):
    """
    Count lines in every ROOT file ending in .EXTENSION.

    [bold cyan]Examples:[/bold cyan]

      locscan count . rb

      locscan count src applescript --format rich

      locscan count lib js -m // --block-start "/*" --block-end "*/" --format json
    """
    try:
        settings = load_config(
            root,
            config_file=config,
            language=language,
            line_markers=as_list(line_marker),
            block_start=block_start,
            block_end=block_end,
            exclude=as_list(exclude),
            exclude_patterns=as_list(exclude_glob),
            output_format=fmt.lower() if fmt else None,
            on_read_error=on_error.lower() if on_error else None,
            verbose=verbose,
            quiet=quiet,
            log_file=str(log_file) if log_file else None,
        )
    except ConfigurationError as e:
        fail(e)

    setup_logging(settings.verbosity, log_file=settings.log_file)

    try:
        result = LineScanner(settings).scan(root, extension)
    except ConfigurationError as e:
        fail(e)
    except ScanAbortedError as e:
        fail(e)

    get_formatter(settings.output_format).render(result)
