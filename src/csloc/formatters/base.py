"""Base formatter interface for csloc report rendering."""

from abc import ABC, abstractmethod
from typing import Sequence

from ..counting.models import CorpusTotals, FileMetrics


class BaseFormatter(ABC):
    """Abstract base class for output formatters.

    ``files`` arrive already in report order. The corpus summary is only
    shown when more than one file is reported.
    """

    @abstractmethod
    def render(self, files: Sequence[FileMetrics], totals: CorpusTotals) -> None:
        """Write the report to stdout."""

    @abstractmethod
    def format(self, files: Sequence[FileMetrics], totals: CorpusTotals) -> str:
        """Return formatted string representation of the report."""

    @staticmethod
    def shows_totals(files: Sequence[FileMetrics]) -> bool:
        return len(files) > 1
