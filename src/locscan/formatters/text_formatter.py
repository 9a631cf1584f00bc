"""Plain-text formatter: one sentence per file and a closing summary."""

from .base import BaseFormatter
from ..scanning.models import ScanResult


class TextFormatter(BaseFormatter):
    """Render the classic line-count report."""

    def render(self, result: ScanResult) -> None:
        print(self.format(result), end="")

    def format(self, result: ScanResult) -> str:
        lines = []
        for index, r in enumerate(result.reports, start=1):
            lines.append(
                f"({index}) {r.path}: {r.code_lines} lines of code out of {r.total_lines} "
                f"({r.comment_lines} comment, {r.blank_lines} blank)"
            )

        agg = result.aggregate
        lines.append("")
        lines.append(
            f"There were {agg.file_count} '.{result.extension}' files containing "
            f"{agg.code_lines} lines of code, with an additional"
        )
        lines.append(
            f"{agg.comment_lines} comment and {agg.blank_lines} blank lines "
            f"for a total of {agg.total_lines} lines of text."
        )

        if result.skipped:
            lines.append("")
            lines.append(f"Skipped {len(result.skipped)} unreadable file(s):")
            for s in result.skipped:
                lines.append(f"  {s.path}: {s.reason}")

        return "\n".join(lines) + "\n"
