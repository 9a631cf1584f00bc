"""Configuration loading and management for locscan.

Configuration sources are merged in priority order:
    1. Defaults (defined in ScanConfig)
    2. Global config (~/.locscan.toml)
    3. Project config (<root>/locscan.toml)
    4. Explicit config file
    5. Environment variables (LOCSCAN_* prefix)
    6. CLI overrides (passed as kwargs)

The project config is looked up in the scanned root, never the working
directory.

Example:
    >>> config = load_config(Path("."), on_read_error="abort")
    >>> config.on_read_error
    'abort'
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

# Type aliases for clarity
Verbosity = Literal["quiet", "normal", "verbose"]
ReadErrorPolicy = Literal["skip", "abort"]

READ_ERROR_POLICIES = ("skip", "abort")
OUTPUT_FORMATS = ("text", "rich", "json", "csv")
VERBOSITIES = ("quiet", "normal", "verbose")

CONFIG_FILENAME = "locscan.toml"
GLOBAL_CONFIG_FILENAME = ".locscan.toml"


@dataclass(frozen=True)
class ScanConfig:
    """Configuration for one scan.

    Attributes:
        File filtering:
            exclude: Substrings; a file whose ``"/" + relative path``
                contains any of them is skipped
            exclude_patterns: Glob patterns matched against the relative path
            include_hidden: Include files under dot-directories or dot-files
            follow_symlinks: Follow symbolic links during traversal

        Reading:
            encoding: Text encoding; decode failures count as read errors
            on_read_error: "skip" drops unreadable files and reports them,
                "abort" stops the scan at the first one

        Markers (optional; otherwise chosen from the extension):
            language: Preset name, e.g. "ruby"
            line_markers: Line-comment tokens
            block_start: Block comment opening token
            block_end: Block comment closing token

        Output control:
            output_format: text, rich, json or csv
            verbosity: Logging verbosity level (quiet, normal, verbose)
            log_file: Also append log records to this file
    """

    # File filtering
    exclude: list[str] = field(default_factory=lambda: ["/spec/"])
    exclude_patterns: list[str] = field(default_factory=list)
    include_hidden: bool = False
    follow_symlinks: bool = False

    # Reading
    encoding: str = "utf-8"
    on_read_error: ReadErrorPolicy = "skip"

    # Markers
    language: Optional[str] = None
    line_markers: list[str] = field(default_factory=list)
    block_start: Optional[str] = None
    block_end: Optional[str] = None

    # Output control
    output_format: str = "text"
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.on_read_error not in READ_ERROR_POLICIES:
            raise InvalidConfigError(
                "on_read_error", self.on_read_error, f"must be one of {', '.join(READ_ERROR_POLICIES)}"
            )
        if self.output_format not in OUTPUT_FORMATS:
            raise InvalidConfigError(
                "output_format", self.output_format, f"must be one of {', '.join(OUTPUT_FORMATS)}"
            )
        if self.verbosity not in VERBOSITIES:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"must be one of {', '.join(VERBOSITIES)}"
            )
        if not self.encoding:
            raise InvalidConfigError("encoding", self.encoding, "must not be empty")
        try:
            "".encode(self.encoding)
        except LookupError:
            raise InvalidConfigError("encoding", self.encoding, "unknown encoding")
        if self.log_file is not None and not isinstance(self.log_file, str):
            raise InvalidConfigError("log_file", self.log_file, "must be a path string")
        for key in ("exclude", "exclude_patterns", "line_markers"):
            value = getattr(self, key)
            if isinstance(value, str) or not all(isinstance(v, str) for v in value):
                raise InvalidConfigError(key, value, "must be a list of strings")

    @property
    def has_explicit_markers(self) -> bool:
        return bool(self.line_markers) or self.block_start is not None or self.block_end is not None


default_config = ScanConfig()


def load_config(root: Optional[Path] = None, config_file: Optional[Path] = None, **overrides) -> ScanConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        root: Directory being scanned; its ``locscan.toml`` is picked up
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); ``None``
            values are ignored so unset flags never mask file settings

    Returns:
        Validated ScanConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing, or a
            value fails validation
    """
    merged: dict = {}

    # 1. Global config
    global_config = Path.home() / GLOBAL_CONFIG_FILENAME
    if global_config.is_file():
        merged.update(_read_config_file(global_config, "global"))

    # 2. Project config in the scanned root
    if root is not None:
        project_config = Path(root) / CONFIG_FILENAME
        # False, not PermissionError, when the root cannot be searched
        if os.path.isfile(project_config):
            merged.update(_read_config_file(project_config, "project"))

    # 3. Explicit config file (highest priority from files)
    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_read_config_file(config_file, "explicit"))

    # 4. Environment variables
    merged.update(_load_env_vars())

    # 5. CLI overrides
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return ScanConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _read_config_file(path: Path, kind: str) -> dict[str, Any]:
    try:
        data = _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid {kind} config '{path}': {e}")
    return _flatten_markers(data, path)


def _flatten_markers(data: dict[str, Any], path: Path) -> dict[str, Any]:
    """Lift a ``[markers]`` table into the flat ScanConfig fields."""
    markers = data.pop("markers", None)
    if markers is None:
        return data
    if not isinstance(markers, dict):
        raise ConfigurationError(f"Invalid [markers] section in '{path}': expected a table")

    mapping = {
        "language": "language",
        "line": "line_markers",
        "block_start": "block_start",
        "block_end": "block_end",
    }
    for key, value in markers.items():
        target = mapping.get(key)
        if target is None:
            raise ConfigurationError(
                f"Invalid [markers] key '{key}' in '{path}'",
                details={"allowed": ", ".join(mapping)},
            )
        if target == "line_markers" and isinstance(value, str):
            value = [value]
        data[target] = value
    return data


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from LOCSCAN_* environment variables.

    Supported environment variables:
        LOCSCAN_ON_READ_ERROR: skip/abort
        LOCSCAN_ENCODING: str
        LOCSCAN_INCLUDE_HIDDEN: bool (true/false/1/0)
        LOCSCAN_FOLLOW_SYMLINKS: bool
        LOCSCAN_LANGUAGE: str
        LOCSCAN_OUTPUT_FORMAT: text/rich/json/csv
        LOCSCAN_VERBOSITY: quiet/normal/verbose
        LOCSCAN_LOG_FILE: str

    List fields (exclude, exclude_patterns, line_markers) are file/CLI only.

    Returns:
        Dict of field_name -> parsed_value for any LOCSCAN_* vars found.
    """
    type_hints = get_type_hints(ScanConfig)

    result: dict[str, Any] = {}

    for field_name in ScanConfig.__dataclass_fields__:
        env_key = f"LOCSCAN_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Args:
        value: Raw string from environment
        type_hint: Type annotation from dataclass

    Returns:
        Parsed value or None if the field can't be set from the environment

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Handle Optional[X] which is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if origin is list or type_hint is list:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    # String (including Literal types like Verbosity)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If no TOML parser is available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            # Fallback to tomli for Python 3.9-3.10
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
