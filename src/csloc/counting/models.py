"""Data models for the line-counting core."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable


class LineVerdict(Enum):
    """Category assigned to a single physical line."""

    BLANK = "blank"
    CODE = "code"
    COMMENT = "comment"
    DOC_COMMENT = "doc_comment"


class Language(Enum):
    """Source file type, as detected from the file extension."""

    C = "C"
    CPP = "C++"
    H = "C/C++ header"
    HPP = "C++ header"
    UNKNOWN = "Unknown"

    @property
    def rank(self) -> int:
        """Position in declaration order, used when sorting by language."""
        return list(Language).index(self)


@dataclass(frozen=True)
class ScanState:
    """Comment-block state carried from one line to the next.

    Only comment state lives here. String and character literal context is
    local to a single line and never carried over.
    """

    inside_block_comment: bool = False
    inside_doc_block_comment: bool = False

    def __post_init__(self) -> None:
        if self.inside_block_comment and self.inside_doc_block_comment:
            raise ValueError("ScanState cannot be inside a block and a doc block at once")

    @property
    def in_comment(self) -> bool:
        return self.inside_block_comment or self.inside_doc_block_comment


# Fresh state at the start of every file
NORMAL = ScanState()


@dataclass(frozen=True)
class FileMetrics:
    """Line counts for a single scanned file.

    ``total_lines`` is derived from the four category counts and cannot be
    passed in.
    """

    path: str
    language: Language
    blank_count: int = 0
    comment_count: int = 0
    doc_comment_count: int = 0
    code_count: int = 0
    total_lines: int = field(init=False)

    def __post_init__(self) -> None:
        for name in ("blank_count", "comment_count", "doc_comment_count", "code_count"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")
        total = self.blank_count + self.comment_count + self.doc_comment_count + self.code_count
        object.__setattr__(self, "total_lines", total)

    def percent(self, count: int) -> float:
        """Share of ``count`` in this file's lines, in percent."""
        if self.total_lines == 0:
            return 0.0
        return 100.0 * count / self.total_lines

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "language": self.language.value,
            "blank_count": self.blank_count,
            "comment_count": self.comment_count,
            "doc_comment_count": self.doc_comment_count,
            "code_count": self.code_count,
            "total_lines": self.total_lines,
        }


@dataclass(frozen=True)
class CorpusTotals:
    """Element-wise sum of FileMetrics counts over a set of files."""

    file_count: int = 0
    blank_count: int = 0
    comment_count: int = 0
    doc_comment_count: int = 0
    code_count: int = 0

    @property
    def total_lines(self) -> int:
        return self.blank_count + self.comment_count + self.doc_comment_count + self.code_count

    @classmethod
    def from_metrics(cls, metrics: Iterable[FileMetrics]) -> CorpusTotals:
        file_count = blank = comment = doc = code = 0
        for m in metrics:
            file_count += 1
            blank += m.blank_count
            comment += m.comment_count
            doc += m.doc_comment_count
            code += m.code_count
        return cls(
            file_count=file_count,
            blank_count=blank,
            comment_count=comment,
            doc_comment_count=doc,
            code_count=code,
        )

    def percent(self, count: int) -> float:
        if self.total_lines == 0:
            return 0.0
        return 100.0 * count / self.total_lines

    def to_dict(self) -> dict[str, Any]:
        return {
            "file_count": self.file_count,
            "blank_count": self.blank_count,
            "comment_count": self.comment_count,
            "doc_comment_count": self.doc_comment_count,
            "code_count": self.code_count,
            "total_lines": self.total_lines,
        }
