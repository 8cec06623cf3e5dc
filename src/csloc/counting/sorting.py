"""Ordering of FileMetrics records for reporting."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any, Callable

from ..exceptions import InvalidConfigError
from .models import FileMetrics


class SortKey(Enum):
    """Columns a report can be ordered by."""

    FILENAME = "filename"
    LANGUAGE = "language"
    COMMENT_COUNT = "comment_count"
    DOC_COMMENT_COUNT = "doc_comment_count"
    BLANK_COUNT = "blank_count"
    CODE_COUNT = "code_count"
    TOTAL_LINES = "total_lines"

    @classmethod
    def parse(cls, name: str) -> SortKey:
        """Resolve a key from its name or one-letter alias (case-insensitive)."""
        lowered = name.strip().lower()
        if lowered in _ALIASES:
            return _ALIASES[lowered]
        try:
            return cls(lowered)
        except ValueError:
            choices = ", ".join(k.value for k in cls)
            raise InvalidConfigError("sort_key", name, f"expected one of {choices} or f/t/c/d/b/s/a")


# f=filename, t=type, c=comments, d=doc comments, b=blank, s=sloc, a=all
_ALIASES = {
    "f": SortKey.FILENAME,
    "t": SortKey.LANGUAGE,
    "c": SortKey.COMMENT_COUNT,
    "d": SortKey.DOC_COMMENT_COUNT,
    "b": SortKey.BLANK_COUNT,
    "s": SortKey.CODE_COUNT,
    "a": SortKey.TOTAL_LINES,
}

_KEY_FUNCS: dict[SortKey, Callable[[FileMetrics], Any]] = {
    SortKey.FILENAME: lambda m: m.path,
    SortKey.LANGUAGE: lambda m: m.language.rank,
    SortKey.COMMENT_COUNT: lambda m: m.comment_count,
    SortKey.DOC_COMMENT_COUNT: lambda m: m.doc_comment_count,
    SortKey.BLANK_COUNT: lambda m: m.blank_count,
    SortKey.CODE_COUNT: lambda m: m.code_count,
    SortKey.TOTAL_LINES: lambda m: m.total_lines,
}


def sort_metrics(
    metrics: Iterable[FileMetrics],
    key: SortKey | str,
    descending: bool = False,
) -> list[FileMetrics]:
    """Return records ordered by ``key``. The sort is stable in both directions."""
    if isinstance(key, str):
        key = SortKey.parse(key)
    return sorted(metrics, key=_KEY_FUNCS[key], reverse=descending)
