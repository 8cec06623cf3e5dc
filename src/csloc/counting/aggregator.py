"""Folding per-line verdicts into per-file and corpus totals."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator

from .classifier import LineClassifier
from .models import CorpusTotals, FileMetrics, Language, LineVerdict
from .sorting import SortKey, sort_metrics


def count_lines(path: str, language: Language, lines: Iterable[str]) -> FileMetrics:
    """Classify every line of one file and return its FileMetrics."""
    classifier = LineClassifier()
    counts = Counter(classifier.classify_lines(lines))
    return FileMetrics(
        path=path,
        language=language,
        blank_count=counts[LineVerdict.BLANK],
        comment_count=counts[LineVerdict.COMMENT],
        doc_comment_count=counts[LineVerdict.DOC_COMMENT],
        code_count=counts[LineVerdict.CODE],
    )


class Aggregator:
    """Ordered collection of FileMetrics, one per scanned file.

    Records keep their insertion order. Totals are recomputed on every
    call to :meth:`totals`; nothing is cached.
    """

    def __init__(self) -> None:
        self._files: list[FileMetrics] = []

    def add(self, path: str, language: Language, lines: Iterable[str]) -> FileMetrics:
        metrics = count_lines(path, language, lines)
        self._files.append(metrics)
        return metrics

    def record(self, metrics: FileMetrics) -> None:
        self._files.append(metrics)

    @property
    def files(self) -> tuple[FileMetrics, ...]:
        return tuple(self._files)

    def __iter__(self) -> Iterator[FileMetrics]:
        return iter(tuple(self._files))

    def __len__(self) -> int:
        return len(self._files)

    def totals(self) -> CorpusTotals:
        return CorpusTotals.from_metrics(self._files)

    def sorted(self, key: SortKey | str, descending: bool = False) -> list[FileMetrics]:
        return sort_metrics(self._files, key, descending=descending)
