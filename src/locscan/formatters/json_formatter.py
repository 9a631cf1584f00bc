"""JSON formatter for locscan."""

import json

from .base import BaseFormatter
from ..scanning.models import ScanResult


class JsonFormatter(BaseFormatter):
    """Render the scan as JSON."""

    def render(self, result: ScanResult) -> None:
        print(self.format(result))

    def format(self, result: ScanResult) -> str:
        agg = result.aggregate
        data = {
            "root": result.root,
            "extension": result.extension,
            "files": [
                {
                    "path": r.path,
                    "code": r.code_lines,
                    "comment": r.comment_lines,
                    "blank": r.blank_lines,
                    "total": r.total_lines,
                }
                for r in result.reports
            ],
            "summary": {
                "files": agg.file_count,
                "code": agg.code_lines,
                "comment": agg.comment_lines,
                "blank": agg.blank_lines,
                "total": agg.total_lines,
            },
            "skipped": [{"path": s.path, "reason": s.reason} for s in result.skipped],
        }
        return json.dumps(data, indent=2)
