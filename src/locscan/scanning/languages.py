"""Comment marker presets, one entry per language.

Adding a new language:
  1. Add a LanguagePreset entry to PRESETS below.
  2. That's it. The CLI and ``preset_for_extension`` pick it up automatically.
"""

from dataclasses import dataclass
from typing import Optional

from ..exceptions import ConfigurationError
from .markers import CommentMarkers


@dataclass(frozen=True)
class LanguagePreset:
    """Markers plus the extensions they usually apply to."""

    name: str
    extensions: tuple[str, ...]
    markers: CommentMarkers


# ── Re-usable building blocks ──────────────────────────────────────

_C_STYLE = CommentMarkers(line_markers=("//",), block_start="/*", block_end="*/")
_HASH = CommentMarkers(line_markers=("#",))


# ── Language definitions ───────────────────────────────────────────

PRESETS = {
    "ruby": LanguagePreset(
        name="ruby",
        extensions=("rb",),
        markers=CommentMarkers(line_markers=("#",), block_start="=begin", block_end="=end"),
    ),
    "applescript": LanguagePreset(
        name="applescript",
        extensions=("applescript",),
        markers=CommentMarkers(line_markers=("#", "--"), block_start="(*", block_end="*)"),
    ),
    "python": LanguagePreset(name="python", extensions=("py", "pyi"), markers=_HASH),
    "shell": LanguagePreset(name="shell", extensions=("sh", "bash", "zsh"), markers=_HASH),
    "c": LanguagePreset(name="c", extensions=("c", "h"), markers=_C_STYLE),
    "cpp": LanguagePreset(name="cpp", extensions=("cpp", "cc", "cxx", "hpp"), markers=_C_STYLE),
    "objc": LanguagePreset(name="objc", extensions=("m", "mm"), markers=_C_STYLE),
    "swift": LanguagePreset(name="swift", extensions=("swift",), markers=_C_STYLE),
    "javascript": LanguagePreset(
        name="javascript", extensions=("js", "jsx", "mjs"), markers=_C_STYLE
    ),
    "typescript": LanguagePreset(name="typescript", extensions=("ts", "tsx"), markers=_C_STYLE),
    "go": LanguagePreset(name="go", extensions=("go",), markers=_C_STYLE),
    "java": LanguagePreset(name="java", extensions=("java",), markers=_C_STYLE),
    "rust": LanguagePreset(name="rust", extensions=("rs",), markers=_C_STYLE),
    "lua": LanguagePreset(
        name="lua",
        extensions=("lua",),
        markers=CommentMarkers(line_markers=("--",), block_start="--[[", block_end="]]"),
    ),
    "sql": LanguagePreset(
        name="sql",
        extensions=("sql",),
        markers=CommentMarkers(line_markers=("--",), block_start="/*", block_end="*/"),
    ),
}


def normalize_extension(extension: str) -> str:
    """Strip a leading dot: ``".rb"`` and ``"rb"`` both become ``"rb"``."""
    return extension[1:] if extension.startswith(".") else extension


def get_preset(name: str) -> LanguagePreset:
    """Look up a preset by name.

    Raises:
        ConfigurationError: If no preset has that name.
    """
    preset = PRESETS.get(name.lower())
    if preset is None:
        raise ConfigurationError(
            f"Unknown language: {name}",
            details={"supported": ", ".join(sorted(PRESETS))},
        )
    return preset


def preset_for_extension(extension: str) -> Optional[LanguagePreset]:
    ext = normalize_extension(extension)
    for preset in PRESETS.values():
        if ext in preset.extensions:
            return preset
    return None
