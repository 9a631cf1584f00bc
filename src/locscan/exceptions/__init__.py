"""Exception hierarchy for locscan."""

from .analysis import AnalysisError, FileAccessError, ScanAbortedError
from .base import LocscanError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidMarkersError,
    PathNotFoundError,
)

__all__ = [
    "LocscanError",
    "AnalysisError",
    "FileAccessError",
    "ScanAbortedError",
    "ConfigurationError",
    "InvalidConfigError",
    "InvalidMarkersError",
    "PathNotFoundError",
]
