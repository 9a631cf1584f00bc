"""Blank / comment / code line classification.

Pure: works on an iterable of lines and never touches the filesystem.
"""

from enum import Enum
from typing import Iterable, Iterator

from .markers import CommentMarkers
from .models import FileReport

# ASCII whitespace and NUL only; a line holding just U+00A0 is code.
WHITESPACE = " \t\n\v\f\r\0"


class LineKind(Enum):
    BLANK = "blank"
    COMMENT = "comment"
    CODE = "code"


class LineClassifier:
    """Single forward pass over a file's lines.

    Block-comment state lives only inside one ``classify`` call, so each
    file starts outside a block.
    """

    def __init__(self, markers: CommentMarkers):
        self.markers = markers
        self._prefixes = markers.prefixes

    def classify(self, lines: Iterable[str]) -> Iterator[LineKind]:
        """Yield one LineKind per input line, in order."""
        block_start = self.markers.block_start
        block_end = self.markers.block_end
        in_block = False

        for line in lines:
            trimmed = line.strip(WHITESPACE)

            # Blank wins even inside an open block.
            if not trimmed:
                yield LineKind.BLANK
                continue

            if in_block or trimmed.startswith(self._prefixes):
                if block_start is not None and trimmed.startswith(block_start):
                    in_block = True
                # Independent of the start check so "/* x */" closes itself.
                if block_end is not None and trimmed.endswith(block_end):
                    in_block = False
                yield LineKind.COMMENT
                continue

            yield LineKind.CODE

    def count(self, path: str, lines: Iterable[str]) -> FileReport:
        """Classify ``lines`` and return the finished counts for ``path``."""
        report = FileReport(path=path)
        for kind in self.classify(lines):
            if kind is LineKind.BLANK:
                report.blank_lines += 1
            elif kind is LineKind.COMMENT:
                report.comment_lines += 1
            else:
                report.code_lines += 1
        return report
