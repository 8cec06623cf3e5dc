"""Quiet formatter: line totals and file paths only."""

from typing import Sequence

from ..counting.models import CorpusTotals, FileMetrics
from .base import BaseFormatter


class QuietFormatter(BaseFormatter):
    """Render ``<total_lines>\\t<path>``, one file per line."""

    def render(self, files: Sequence[FileMetrics], totals: CorpusTotals) -> None:
        if files:
            print(self.format(files, totals))

    def format(self, files: Sequence[FileMetrics], totals: CorpusTotals) -> str:
        return "\n".join(f"{m.total_lines}\t{m.path}" for m in files)
