"""
csloc - C/C++ source line counter

Classifies every line of C and C++ sources as blank, code, comment or
documentation comment, and reports per-file and corpus totals.
"""

__version__ = "0.1.0"

from .api import count_paths, count_text
from .counting import (
    Aggregator,
    CorpusTotals,
    FileMetrics,
    Language,
    LineClassifier,
    LineVerdict,
    SortKey,
)

__all__ = [
    "count_paths",  # Main entry point
    "count_text",
    "Aggregator",
    "CorpusTotals",
    "FileMetrics",
    "Language",
    "LineClassifier",
    "LineVerdict",
    "SortKey",
]
