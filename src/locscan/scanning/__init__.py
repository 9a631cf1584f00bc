"""Line classification and tree scanning."""

from .classifier import LineClassifier, LineKind
from .exclusions import build_exclude
from .languages import PRESETS, LanguagePreset, get_preset, preset_for_extension
from .markers import CommentMarkers
from .models import AggregateReport, FileReport, ScanResult, SkippedFile
from .scanner import LineScanner, iter_file_reports, resolve_markers, scan_file, scan_tree
from .sources import FileSource, FilesystemSource, MemorySource

__all__ = [
    "LineClassifier",
    "LineKind",
    "build_exclude",
    "PRESETS",
    "LanguagePreset",
    "get_preset",
    "preset_for_extension",
    "CommentMarkers",
    "AggregateReport",
    "FileReport",
    "ScanResult",
    "SkippedFile",
    "LineScanner",
    "iter_file_reports",
    "resolve_markers",
    "scan_file",
    "scan_tree",
    "FileSource",
    "FilesystemSource",
    "MemorySource",
]
