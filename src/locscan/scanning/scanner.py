"""Tree scanning: enumerate, filter, sort, classify, fold.

``iter_file_reports`` is the lazy core; ``scan_tree`` drives it and builds
the aggregate. ``LineScanner`` wires both to a ScanConfig for the CLI.
"""

from pathlib import Path
from typing import Callable, Iterator, Optional, Union

from ..config import ScanConfig, default_config
from ..exceptions import ConfigurationError, FileAccessError, PathNotFoundError, ScanAbortedError
from ..logging_config import get_logger
from .classifier import LineClassifier
from .exclusions import ExcludePredicate, build_exclude, exclude_nothing
from .languages import get_preset, normalize_extension, preset_for_extension
from .markers import CommentMarkers
from .models import FileReport, ScanResult, SkippedFile
from .sources import FileSource, FilesystemSource

logger = get_logger(__name__)

PathLike = Union[str, Path]
ErrorHandler = Callable[[str, FileAccessError], None]


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` only; a trailing newline does not add an empty line."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def scan_file(
    path: str,
    markers: CommentMarkers,
    source: Optional[FileSource] = None,
    root: PathLike = ".",
) -> FileReport:
    """
    Count one file.

    Args:
        path: File path relative to ``root``
        markers: Comment markers to classify with
        source: Where to read from (default: local filesystem)
        root: Directory ``path`` is relative to

    Returns:
        Finished FileReport for ``path``

    Raises:
        FileAccessError: If the file cannot be opened or decoded
    """
    source = source or FilesystemSource()
    text = source.read_text(root, path)
    return LineClassifier(markers).count(path, split_lines(text))


def _check_root(root: PathLike, source: FileSource) -> None:
    if not source.is_directory(root):
        raise PathNotFoundError(Path(root))
    if not source.is_readable(root):
        raise PathNotFoundError(Path(root), reason="Directory is not readable")


def list_candidates(
    root: PathLike,
    extension: str,
    source: FileSource,
    exclude: ExcludePredicate = exclude_nothing,
    on_error: Optional[ErrorHandler] = None,
) -> list[str]:
    """
    Matching files under ``root``, exclusions removed, sorted by path.

    A subdirectory that cannot be listed goes to ``on_error`` unless it is
    excluded itself; without a handler its FileAccessError propagates.
    """
    ext = normalize_extension(extension)

    def unlistable(path: str, error: FileAccessError) -> None:
        if exclude(path + "/"):
            logger.debug(f"Skipped (excluded, unreadable): {path}")
            return
        if on_error is None:
            raise error
        on_error(path, error)

    files = []
    for path in source.list_files(root, ext, on_error=unlistable):
        if exclude(path):
            logger.debug(f"Skipped (excluded): {path}")
            continue
        files.append(path)
    return sorted(files)


def iter_file_reports(
    root: PathLike,
    extension: str,
    markers: CommentMarkers,
    exclude: ExcludePredicate = exclude_nothing,
    source: Optional[FileSource] = None,
    on_error: Optional[ErrorHandler] = None,
) -> Iterator[FileReport]:
    """
    Yield one FileReport per matching file, in sorted path order.

    Every call walks the tree afresh. Root and markers are checked before
    the first file is listed.

    Args:
        root: Directory to search recursively
        extension: File extension, with or without the leading dot
        markers: Comment markers
        exclude: Predicate on the relative path; True drops the file
        source: File source (default: local filesystem)
        on_error: Called with (path, error) for unreadable files and
            subdirectories, which are then skipped. Without it the
            FileAccessError propagates.

    Raises:
        PathNotFoundError: If ``root`` is not a readable directory
        ConfigurationError: If ``markers`` are malformed
        FileAccessError: On an unreadable file when ``on_error`` is None
    """
    source = source or FilesystemSource()
    markers.validate()
    _check_root(root, source)

    classifier = LineClassifier(markers)
    for path in list_candidates(root, extension, source, exclude, on_error):
        try:
            text = source.read_text(root, path)
        except FileAccessError as e:
            if on_error is None:
                raise
            on_error(path, e)
            continue
        report = classifier.count(path, split_lines(text))
        logger.debug(
            f"Counted {path}: {report.code_lines} code, "
            f"{report.comment_lines} comment, {report.blank_lines} blank"
        )
        yield report


def scan_tree(
    root: PathLike,
    extension: str,
    markers: CommentMarkers,
    exclude: ExcludePredicate = exclude_nothing,
    source: Optional[FileSource] = None,
    on_read_error: str = "skip",
) -> ScanResult:
    """
    Scan a tree and fold every FileReport into the aggregate.

    Args:
        root: Directory to search recursively
        extension: File extension, with or without the leading dot
        markers: Comment markers
        exclude: Predicate on the relative path; True drops the file
        source: File source (default: local filesystem)
        on_read_error: "skip" to record unreadable files in
            ``ScanResult.skipped`` and go on, "abort" to stop

    Returns:
        ScanResult with ordered reports, aggregate and skipped files

    Raises:
        PathNotFoundError: If ``root`` is not a readable directory
        ConfigurationError: If ``markers`` or ``on_read_error`` are invalid
        ScanAbortedError: On an unreadable file under the abort policy
    """
    if on_read_error not in ("skip", "abort"):
        raise ConfigurationError(
            f"Unknown read error policy: {on_read_error}",
            details={"allowed": "skip, abort"},
        )

    result = ScanResult(root=str(root), extension=normalize_extension(extension))

    def skip(path: str, error: FileAccessError) -> None:
        logger.warning(f"Skipping unreadable {path}: {error.reason}")
        result.skipped.append(SkippedFile(path=path, reason=error.reason))

    handler = skip if on_read_error == "skip" else None
    reports = iter_file_reports(root, extension, markers, exclude, source, on_error=handler)

    try:
        for report in reports:
            result.reports.append(report)
            result.aggregate.add(report)
    except FileAccessError as e:
        raise ScanAbortedError(e.filepath, e.reason) from e

    logger.info(
        f"Scan complete: {result.aggregate.file_count} counted, {len(result.skipped)} skipped"
    )
    return result


def resolve_markers(config: ScanConfig, extension: str) -> CommentMarkers:
    """
    Pick the markers for a scan.

    Explicit markers in ``config`` win, then ``config.language``, then the
    preset registered for ``extension``.

    Raises:
        ConfigurationError: If nothing applies or the markers are malformed
    """
    if config.has_explicit_markers:
        return CommentMarkers(
            line_markers=tuple(config.line_markers),
            block_start=config.block_start,
            block_end=config.block_end,
        )
    if config.language:
        return get_preset(config.language).markers
    preset = preset_for_extension(extension)
    if preset is None:
        raise ConfigurationError(
            f"No comment markers known for '.{normalize_extension(extension)}' files",
            details={"hint": "pass --language or --line-marker"},
        )
    return preset.markers


class LineScanner:
    """A configured scanner: exclusions, read policy and source in one place."""

    def __init__(
        self,
        config: Optional[ScanConfig] = None,
        source: Optional[FileSource] = None,
        markers: Optional[CommentMarkers] = None,
    ):
        """
        Initialize scanner.

        Args:
            config: Scan configuration (default: built-in defaults)
            source: File source (default: local filesystem built from config)
            markers: Markers to use instead of resolving them from config
        """
        self.config = config or default_config
        self.source = source or FilesystemSource(
            encoding=self.config.encoding,
            follow_symlinks=self.config.follow_symlinks,
            include_hidden=self.config.include_hidden,
        )
        self.markers = markers
        self.exclude = build_exclude(self.config.exclude, self.config.exclude_patterns)

    def markers_for(self, extension: str) -> CommentMarkers:
        if self.markers is not None:
            return self.markers
        return resolve_markers(self.config, extension)

    def scan(self, root: PathLike, extension: str) -> ScanResult:
        markers = self.markers_for(extension)
        logger.debug(f"Scanning {root} for .{normalize_extension(extension)} with {markers.describe()}")
        return scan_tree(
            root,
            extension,
            markers,
            exclude=self.exclude,
            source=self.source,
            on_read_error=self.config.on_read_error,
        )

    def iter_reports(self, root: PathLike, extension: str) -> Iterator[FileReport]:
        """Lazy per-file reports; unreadable files follow the configured policy."""
        markers = self.markers_for(extension)

        def warn(path: str, error: FileAccessError) -> None:
            logger.warning(f"Skipping unreadable {path}: {error.reason}")

        handler = warn if self.config.on_read_error == "skip" else None
        return iter_file_reports(
            root, extension, markers, self.exclude, self.source, on_error=handler
        )
