"""Scan-time exceptions: file access and aborted runs."""

from pathlib import Path

from .base import LocscanError


class AnalysisError(LocscanError):
    """Base class for errors raised while scanning files."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a file cannot be opened or decoded."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ScanAbortedError(AnalysisError):
    """Raised when a scan stops on an unreadable file under the abort policy."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Scan aborted at {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason
