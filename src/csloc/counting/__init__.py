"""Line classification and counting for C/C++ sources."""

from .aggregator import Aggregator, count_lines
from .classifier import LineClassifier, scan_line
from .models import (
    NORMAL,
    CorpusTotals,
    FileMetrics,
    Language,
    LineVerdict,
    ScanState,
)
from .sorting import SortKey, sort_metrics

__all__ = [
    "Aggregator",
    "count_lines",
    "LineClassifier",
    "scan_line",
    "NORMAL",
    "CorpusTotals",
    "FileMetrics",
    "Language",
    "LineVerdict",
    "ScanState",
    "SortKey",
    "sort_metrics",
]
