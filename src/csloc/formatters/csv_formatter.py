"""CSV formatter for csloc."""

import csv
import io
from typing import Sequence

from ..counting.models import CorpusTotals, FileMetrics
from .base import BaseFormatter

HEADER = [
    "filename",
    "language",
    "comment_count",
    "doc_comment_count",
    "blank_count",
    "code_count",
    "total_lines",
]


class CsvFormatter(BaseFormatter):
    """Render the report as CSV."""

    def render(self, files: Sequence[FileMetrics], totals: CorpusTotals) -> None:
        print(self.format(files, totals), end="")

    def format(self, files: Sequence[FileMetrics], totals: CorpusTotals) -> str:
        output = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(HEADER)
        for m in files:
            writer.writerow([
                m.path, m.language.value,
                m.comment_count, m.doc_comment_count,
                m.blank_count, m.code_count, m.total_lines,
            ])
        if self.shows_totals(files):
            writer.writerow([
                "SUM", "",
                totals.comment_count, totals.doc_comment_count,
                totals.blank_count, totals.code_count, totals.total_lines,
            ])
        return output.getvalue()
