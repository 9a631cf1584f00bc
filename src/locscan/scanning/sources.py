"""File enumeration and reading behind a swappable interface.

The scanner only ever talks to a FileSource, so classification and tree
scanning can be exercised without a real directory.
"""

import os
from abc import ABC, abstractmethod
from pathlib import Path, PurePosixPath
from typing import Callable, Iterable, Mapping, Optional, Union

from ..exceptions import FileAccessError
from ..logging_config import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]
WalkErrorHandler = Callable[[str, FileAccessError], None]


def _matches_extension(name: str, extension: str) -> bool:
    # Exact, case-sensitive suffix match; "rb" never matches "RB" or "rbx".
    return name.endswith("." + extension)


class FileSource(ABC):
    """Where files come from."""

    @abstractmethod
    def is_directory(self, root: PathLike) -> bool:
        """Return True if ``root`` names an existing directory."""

    def is_readable(self, root: PathLike) -> bool:
        """Return True if the entries of directory ``root`` can be listed."""
        return self.is_directory(root)

    @abstractmethod
    def list_files(
        self, root: PathLike, extension: str, on_error: Optional[WalkErrorHandler] = None
    ) -> Iterable[str]:
        """
        Recursively list files under ``root`` ending in ``.extension``.

        Args:
            root: Directory to search
            extension: Extension without the leading dot
            on_error: Called with (relative dir, error) for a subdirectory
                that cannot be listed. Without it the FileAccessError
                propagates.

        Returns:
            Paths relative to ``root`` with POSIX separators, in any order
        """

    @abstractmethod
    def read_text(self, root: PathLike, path: str) -> str:
        """
        Return the decoded contents of ``path`` (relative to ``root``).

        Raises:
            FileAccessError: If the file cannot be opened or decoded
        """


class FilesystemSource(FileSource):
    """Reads from the local disk."""

    def __init__(
        self, encoding: str = "utf-8", follow_symlinks: bool = False, include_hidden: bool = False
    ):
        self.encoding = encoding
        self.follow_symlinks = follow_symlinks
        self.include_hidden = include_hidden

    def is_directory(self, root: PathLike) -> bool:
        return Path(root).is_dir()

    def is_readable(self, root: PathLike) -> bool:
        try:
            with os.scandir(root):
                pass
        except OSError:
            return False
        return True

    def list_files(
        self, root: PathLike, extension: str, on_error: Optional[WalkErrorHandler] = None
    ) -> Iterable[str]:
        root_path = Path(root)

        def walk_error(error: OSError) -> None:
            failed = Path(error.filename) if error.filename else root_path
            try:
                relative = failed.relative_to(root_path).as_posix()
            except ValueError:
                relative = str(failed)
            access_error = FileAccessError(failed, f"Directory scan failed: {error.strerror or error}")
            if on_error is None:
                raise access_error
            on_error(relative, access_error)

        # Real paths already walked; stops symlink loops when links are followed.
        visited = set()

        for dirpath, dirnames, filenames in os.walk(
            root_path, onerror=walk_error, followlinks=self.follow_symlinks
        ):
            if self.follow_symlinks:
                real = os.path.realpath(dirpath)
                if real in visited:
                    logger.debug(f"Skipped (already walked): {dirpath}")
                    dirnames[:] = []
                    continue
                visited.add(real)

            if not self.include_hidden:
                dirnames[:] = [d for d in dirnames if not d.startswith(".")]

            base = Path(dirpath)
            for name in filenames:
                filepath = base / name
                if not _matches_extension(name, extension):
                    continue
                relative = filepath.relative_to(root_path).as_posix()
                if name.startswith(".") and not self.include_hidden:
                    logger.debug(f"Skipped (hidden): {relative}")
                    continue
                if filepath.is_symlink() and not self.follow_symlinks:
                    continue
                if not filepath.is_file():
                    continue
                yield relative

    def read_text(self, root: PathLike, path: str) -> str:
        filepath = Path(root) / path
        try:
            with open(filepath, encoding=self.encoding, errors="strict", newline="") as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise FileAccessError(filepath, f"Encoding error: {e}")
        except OSError as e:
            raise FileAccessError(filepath, f"OS error: {e}")


class MemorySource(FileSource):
    """Serves files from a dict of relative path -> content.

    ``bytes`` values are decoded on read so encoding failures can be
    reproduced; paths listed in ``unreadable`` fail as if access was denied.
    """

    def __init__(
        self,
        files: Mapping[str, Union[str, bytes]],
        root: PathLike = ".",
        encoding: str = "utf-8",
        unreadable: Optional[Iterable[str]] = None,
    ):
        self.files = dict(files)
        self.root = PurePosixPath(root)
        self.encoding = encoding
        self.unreadable = set(unreadable or ())

    def is_directory(self, root: PathLike) -> bool:
        return PurePosixPath(root) == self.root

    def list_files(
        self, root: PathLike, extension: str, on_error: Optional[WalkErrorHandler] = None
    ) -> Iterable[str]:
        if not self.is_directory(root):
            return []
        return [p for p in self.files if _matches_extension(PurePosixPath(p).name, extension)]

    def read_text(self, root: PathLike, path: str) -> str:
        filepath = Path(PurePosixPath(root) / path)
        if path in self.unreadable or path not in self.files:
            raise FileAccessError(filepath, "Permission denied")
        content = self.files[path]
        if isinstance(content, bytes):
            try:
                return content.decode(self.encoding)
            except UnicodeDecodeError as e:
                raise FileAccessError(filepath, f"Encoding error: {e}")
        return content
