"""
locscan - count code, comment and blank lines in a source tree.

Each line of every matching file is classified as blank, comment or code
using per-language comment markers, with multi-line comment blocks
tracked per file.
"""

__version__ = "0.1.0"

from .api import count_lines
from .scanning import (
    AggregateReport,
    CommentMarkers,
    FileReport,
    LineClassifier,
    LineScanner,
    ScanResult,
    scan_file,
    scan_tree,
)

__all__ = [
    "count_lines",  # Main entry point
    "AggregateReport",
    "CommentMarkers",
    "FileReport",
    "LineClassifier",
    "LineScanner",
    "ScanResult",
    "scan_file",
    "scan_tree",
]
