"""Rich terminal formatter for csloc."""

import io
from typing import Optional, Sequence, Union

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..counting.models import CorpusTotals, FileMetrics
from .base import BaseFormatter

_COUNT_COLUMNS = (
    ("Comments", "comment_count"),
    ("Doc Comments", "doc_comment_count"),
    ("Blank", "blank_count"),
    ("Code", "code_count"),
)


def _cell(record: Union[FileMetrics, CorpusTotals], attr: str) -> str:
    count = getattr(record, attr)
    return f"{count} ({record.percent(count):.1f}%)"


class RichFormatter(BaseFormatter):
    """Table with one row per file, percentages, and a SUM row."""

    def __init__(self, console: Optional[Console] = None, width: int = 120):
        self.console = console or Console()
        self.width = width

    def render(self, files: Sequence[FileMetrics], totals: CorpusTotals) -> None:
        self.console.print(self._header(files))
        if files:
            self.console.print(self._build_table(files, totals))

    def format(self, files: Sequence[FileMetrics], totals: CorpusTotals) -> str:
        buffer = io.StringIO()
        plain = Console(file=buffer, width=self.width, color_system=None, highlight=False)
        plain.print(self._header(files))
        if files:
            plain.print(self._build_table(files, totals))
        return buffer.getvalue()

    def _header(self, files: Sequence[FileMetrics]) -> str:
        return f"[bold cyan]Files processed:[/bold cyan] {len(files)}"

    def _build_table(self, files: Sequence[FileMetrics], totals: CorpusTotals) -> Table:
        table = Table(show_header=True, show_lines=False, pad_edge=True)
        table.add_column("Filename", overflow="fold")
        table.add_column("Language")
        for label, _ in _COUNT_COLUMNS:
            table.add_column(label, justify="right")
        table.add_column("# of lines", justify="right")

        last = len(files) - 1
        for i, m in enumerate(files):
            table.add_row(
                escape(m.path),
                m.language.value,
                *(_cell(m, attr) for _, attr in _COUNT_COLUMNS),
                str(m.total_lines),
                end_section=(i == last),
            )

        if self.shows_totals(files):
            table.add_row(
                "[bold]SUM[/bold]",
                "",
                *(_cell(totals, attr) for _, attr in _COUNT_COLUMNS),
                f"[bold]{totals.total_lines}[/bold]",
            )
        return table
