"""JSON formatter for csloc."""

import json
from typing import Sequence

from ..counting.models import CorpusTotals, FileMetrics
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the report as a JSON document."""

    def render(self, files: Sequence[FileMetrics], totals: CorpusTotals) -> None:
        print(self.format(files, totals))

    def format(self, files: Sequence[FileMetrics], totals: CorpusTotals) -> str:
        data = {
            "files": [m.to_dict() for m in files],
            "totals": totals.to_dict() if self.shows_totals(files) else None,
        }
        return json.dumps(data, indent=2)
