"""Configuration exceptions: markers, settings, root paths."""

from pathlib import Path
from typing import Any

from .base import LocscanError


class ConfigurationError(LocscanError):
    """Base class for configuration-related errors.

    Always raised before any file is read.
    """

    pass


class InvalidMarkersError(ConfigurationError):
    """Raised when comment markers are malformed."""

    def __init__(self, reason: str):
        super().__init__(f"Invalid comment markers: {reason}", details={"reason": reason})
        self.reason = reason


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class PathNotFoundError(ConfigurationError):
    """Raised when the root directory does not exist or is not a directory."""

    def __init__(self, path: Path, reason: str = "Directory does not exist"):
        super().__init__(f"Path not found: {path}", details={"path": str(path), "reason": reason})
        self.path = path
        self.reason = reason
