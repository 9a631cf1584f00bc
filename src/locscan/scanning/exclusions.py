"""Exclude predicates for tree scans."""

from pathlib import PurePosixPath
from typing import Callable, Iterable, Optional

ExcludePredicate = Callable[[str], bool]


def should_skip_file(path: str, exclude_patterns: Iterable[str]) -> bool:
    """
    Check if a file should be skipped based on glob patterns.

    Args:
        path: Relative POSIX path of the file
        exclude_patterns: Glob patterns matched with ``PurePath.match``

    Returns:
        True if file should be skipped
    """
    pure = PurePosixPath(path)
    for pattern in exclude_patterns:
        if pure.match(pattern):
            return True
    return False


def contains_any(path: str, substrings: Iterable[str]) -> bool:
    """Substring match against ``"/" + path`` so ``"/spec/"`` also hits a top-level ``spec/``."""
    anchored = "/" + path
    return any(s in anchored for s in substrings)


def build_exclude(
    substrings: Optional[Iterable[str]] = None, patterns: Optional[Iterable[str]] = None
) -> ExcludePredicate:
    """Combine substring and glob exclusions into one predicate."""
    subs = tuple(substrings or ())
    globs = tuple(patterns or ())

    def exclude(path: str) -> bool:
        return contains_any(path, subs) or should_skip_file(path, globs)

    return exclude


def exclude_nothing(path: str) -> bool:
    return False
