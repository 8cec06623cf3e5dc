"""Line classifier for C and C++ sources.

A single left-to-right pass per line decides whether the line is blank,
code, an ordinary comment or a documentation comment. Block-comment state
is carried across lines in a ScanState value; string and character literal
context is rebuilt from scratch on every line.

Marker priority outside literals:
    ``///`` or ``//!``  doc comment, rest of line ignored
    ``//``              comment, rest of line ignored
    ``/**`` or ``/*!``  doc block comment, opens a doc block if not closed
    ``/*``              block comment, opens a block if not closed

A marker that follows code on the same line leaves the line as code; the
block state still changes when an unclosed block starts after code. When a
line starts inside a block comment, everything after the closing ``*/`` is
discarded.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .models import NORMAL, LineVerdict, ScanState

_DOC_LINE_MARKERS = ("///", "//!")
_DOC_BLOCK_CHARS = ("*", "!")

_OPEN_BLOCK = ScanState(inside_block_comment=True)
_OPEN_DOC_BLOCK = ScanState(inside_doc_block_comment=True)


def scan_line(raw_line: str, state: ScanState = NORMAL) -> tuple[LineVerdict, ScanState]:
    """Classify one line and return the verdict with the state for the next line."""
    line = raw_line.strip()
    if not line:
        return LineVerdict.BLANK, state

    if state.in_comment:
        verdict = LineVerdict.DOC_COMMENT if state.inside_doc_block_comment else LineVerdict.COMMENT
        if "*/" in line:
            return verdict, NORMAL
        return verdict, state

    inside_string = False
    inside_char = False
    seen_code = False
    i = 0
    n = len(line)

    while i < n:
        ch = line[i]

        if inside_string or inside_char:
            if ch == "\\":
                i += 2
                continue
            if inside_string and ch == '"':
                inside_string = False
            elif inside_char and ch == "'":
                inside_char = False
            i += 1
            continue

        if ch == '"':
            inside_string = True
            seen_code = True
        elif ch == "'":
            inside_char = True
            seen_code = True
        elif line.startswith("//", i):
            if seen_code:
                return LineVerdict.CODE, state
            if line.startswith(_DOC_LINE_MARKERS, i):
                return LineVerdict.DOC_COMMENT, state
            return LineVerdict.COMMENT, state
        elif line.startswith("/*", i):
            close = line.find("*/", i + 2)
            # "/**/" is an empty plain comment: its second '*' belongs to the closer
            is_doc = line[i + 2 : i + 3] in _DOC_BLOCK_CHARS and close != i + 2
            if close == -1:
                next_state = _OPEN_DOC_BLOCK if is_doc else _OPEN_BLOCK
            else:
                next_state = state
            if seen_code:
                return LineVerdict.CODE, next_state
            if is_doc:
                return LineVerdict.DOC_COMMENT, next_state
            return LineVerdict.COMMENT, next_state
        elif not ch.isspace():
            seen_code = True
        i += 1

    return LineVerdict.CODE, state


class LineClassifier:
    """Stateful per-file wrapper around :func:`scan_line`.

    Create one instance per file and feed it every line in order. Instances
    are not meant to be reused across files.
    """

    def __init__(self) -> None:
        self._state = NORMAL

    @property
    def state(self) -> ScanState:
        return self._state

    def classify_line(self, raw_line: str) -> LineVerdict:
        verdict, self._state = scan_line(raw_line, self._state)
        return verdict

    def classify_lines(self, lines: Iterable[str]) -> Iterator[LineVerdict]:
        for line in lines:
            yield self.classify_line(line)
