"""Data models for the scanning layer."""

from dataclasses import dataclass, field


@dataclass
class FileReport:
    """Line counts for a single file"""

    path: str
    code_lines: int = 0
    comment_lines: int = 0
    blank_lines: int = 0

    @property
    def total_lines(self) -> int:
        return self.code_lines + self.comment_lines + self.blank_lines


@dataclass
class AggregateReport:
    """Running totals across every file in a scan."""

    file_count: int = 0
    code_lines: int = 0
    comment_lines: int = 0
    blank_lines: int = 0

    @property
    def total_lines(self) -> int:
        return self.code_lines + self.comment_lines + self.blank_lines

    def add(self, report: FileReport) -> None:
        """Fold one file's counts into the totals."""
        self.file_count += 1
        self.code_lines += report.code_lines
        self.comment_lines += report.comment_lines
        self.blank_lines += report.blank_lines


@dataclass(frozen=True)
class SkippedFile:
    """A file left out of the totals because it could not be read."""

    path: str
    reason: str


@dataclass
class ScanResult:
    """Everything one ``scan_tree`` call produced."""

    root: str
    extension: str
    reports: list[FileReport] = field(default_factory=list)
    aggregate: AggregateReport = field(default_factory=AggregateReport)
    skipped: list[SkippedFile] = field(default_factory=list)
