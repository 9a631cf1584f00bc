"""
locscan public API.

Usage:
    from locscan import count_lines

    result = count_lines("path/to/project", "rb")
    print(result.aggregate.code_lines)
"""

from pathlib import Path
from typing import Optional, Sequence, Union

from .config import load_config
from .scanning import CommentMarkers, LineScanner, ScanResult


def count_lines(
    root: Union[str, Path],
    extension: str,
    markers: Optional[Union[CommentMarkers, Sequence[str]]] = None,
    exclude: Optional[Sequence[str]] = None,
    on_read_error: Optional[str] = None,
    config_file: Optional[Path] = None,
) -> ScanResult:
    """
    Count code, comment and blank lines under ``root``.

    Args:
        root: Directory to scan recursively
        extension: File extension, with or without the leading dot
        markers: CommentMarkers, or a token list in the
            ``[block_start, *line_markers, block_end]`` form; default is
            the configured language or the preset for ``extension``
        exclude: Path substrings to skip (replaces the configured list)
        on_read_error: "skip" or "abort" (default from config: "skip")
        config_file: Optional TOML config file

    Returns:
        ScanResult with per-file reports, aggregate and skipped files

    Raises:
        PathNotFoundError: If ``root`` is not a directory
        ConfigurationError: If markers or settings are invalid
        ScanAbortedError: If a file is unreadable and the policy is "abort"
    """
    config = load_config(
        Path(root),
        config_file=config_file,
        exclude=list(exclude) if exclude is not None else None,
        on_read_error=on_read_error,
    )
    if markers is not None and not isinstance(markers, CommentMarkers):
        markers = CommentMarkers.from_tokens(markers)
    return LineScanner(config, markers=markers).scan(root, extension)
