"""CSV formatter for locscan."""

import csv
import io

from .base import BaseFormatter
from ..scanning.models import ScanResult


class CsvFormatter(BaseFormatter):
    """Render per-file counts as CSV, with a closing TOTAL row."""

    def render(self, result: ScanResult) -> None:
        print(self.format(result), end="")

    def format(self, result: ScanResult) -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(["file", "code", "comment", "blank", "total"])
        for r in result.reports:
            writer.writerow([r.path, r.code_lines, r.comment_lines, r.blank_lines, r.total_lines])
        agg = result.aggregate
        writer.writerow(["TOTAL", agg.code_lines, agg.comment_lines, agg.blank_lines, agg.total_lines])
        return output.getvalue()
