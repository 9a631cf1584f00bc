"""
Logging setup for locscan.

Records go to stderr through rich so they never mix with the report on
stdout; a ``log_file`` adds a plain-text copy.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Route locscan log records to stderr (and optionally a file).

    Args:
        verbosity: "quiet" (errors only), "normal" (warnings, e.g. skipped
            files) or "verbose" (every file counted)
        log_file: Path of a file to append records to

    Returns:
        The ``locscan`` logger
    """
    if verbosity not in LEVELS:
        raise ValueError(f"Unknown verbosity: {verbosity}")
    level = LEVELS[verbosity]
    verbose = verbosity == "verbose"

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            markup=False,
            rich_tracebacks=True,
            show_time=verbose,
            show_path=verbose,
        )
    ]
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)

    logging.basicConfig(level=level, format="%(message)s", handlers=handlers, force=True)

    logger = logging.getLogger("locscan")
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the ``locscan`` namespace; module names are prefixed."""
    if name is None:
        return logging.getLogger("locscan")
    if not name.startswith("locscan"):
        name = f"locscan.{name}"
    return logging.getLogger(name)
