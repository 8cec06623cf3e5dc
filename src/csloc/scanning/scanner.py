"""Source scanner: turns command-line inputs into counted FileMetrics.

Inputs are processed strictly in the order given. Directory entries are
visited in name order, so the report order is reproducible.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..config import CountConfig, default_config
from ..counting.aggregator import Aggregator
from ..counting.models import Language
from ..exceptions import FileAccessError, InvalidPathError, UnsupportedLanguageError
from ..file_ops import read_source_lines, should_skip_dir, should_skip_file
from ..logging_config import get_logger
from .languages import detect_language

logger = get_logger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class SourceFile:
    """A file selected for counting."""

    path: Path
    language: Language

    @property
    def display_path(self) -> str:
        return str(self.path)


@dataclass
class ScanStats:
    """Counters for the most recent collect/scan call."""

    files_found: int = 0
    files_scanned: int = 0
    files_skipped: int = 0
    files_errored: int = 0
    inputs_missing: int = 0
    limit_reached: bool = False


class SourceScanner:
    """Collects C/C++ files from files and directories and counts their lines."""

    def __init__(self, config: Optional[CountConfig] = None):
        self.config = config or default_config
        self.stats = ScanStats()
        logger.debug(f"Initialized {self.__class__.__name__} (recursive={self.config.recursive})")

    # ── Collection ─────────────────────────────────────────────

    def collect(self, inputs: Sequence[PathLike]) -> list[SourceFile]:
        """
        Expand inputs into the ordered list of files to count.

        Args:
            inputs: File and directory paths, in report order

        Returns:
            Selected files, each listed once
        """
        self.stats = ScanStats()
        selected: list[SourceFile] = []
        seen: set[Path] = set()

        for source in self._iter_candidates(inputs):
            key = source.path.resolve()
            if key in seen:
                logger.debug(f"Skipped (duplicate): {source.path}")
                continue
            if len(selected) >= self.config.max_files:
                self.stats.limit_reached = True
                logger.warning(f"Reached max files limit ({self.config.max_files})")
                break
            seen.add(key)
            selected.append(source)

        self.stats.files_found = len(selected)
        return selected

    def _iter_candidates(self, inputs: Sequence[PathLike]) -> Iterator[SourceFile]:
        for raw in inputs:
            path = Path(raw)
            try:
                self._check_input(path)
            except InvalidPathError as e:
                self.stats.inputs_missing += 1
                logger.error(f"Input not found: {e.path} ({e.reason})")
                continue

            if path.is_dir():
                yield from self._walk(path, visited=set())
                continue

            try:
                yield self._explicit_file(path)
            except UnsupportedLanguageError as e:
                self.stats.files_skipped += 1
                logger.warning(f"Skipping {e.filepath}: unsupported file type ({e.extension or 'no extension'})")

    @staticmethod
    def _check_input(path: Path) -> None:
        if not path.exists():
            reason = "broken symlink" if path.is_symlink() else "no such file or directory"
            raise InvalidPathError(path, reason)

    def _explicit_file(self, path: Path) -> SourceFile:
        # Named files bypass the hidden/exclude filters; only the type is checked
        language = detect_language(path)
        if language is Language.UNKNOWN and not self.config.include_unknown:
            raise UnsupportedLanguageError(path, path.suffix)
        return SourceFile(path=path, language=language)

    def _walk(self, directory: Path, visited: set[Path]) -> Iterator[SourceFile]:
        real = directory.resolve()
        if real in visited:
            logger.warning(f"Symlink loop detected at {directory}")
            return
        visited.add(real)

        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            self.stats.files_errored += 1
            logger.warning(f"Cannot list directory {directory}: {e}")
            return

        cfg = self.config
        for entry in entries:
            if not cfg.allow_hidden_files and entry.name.startswith("."):
                logger.debug(f"Skipped (hidden): {entry}")
                continue
            if entry.is_symlink() and not cfg.follow_symlinks:
                logger.debug(f"Skipped (symlink): {entry}")
                continue

            if entry.is_dir():
                if not cfg.recursive:
                    continue
                if should_skip_dir(entry, cfg.exclude_patterns):
                    logger.debug(f"Skipped (pattern): {entry}/")
                    continue
                yield from self._walk(entry, visited)
            elif entry.is_file():
                language = detect_language(entry)
                if language is Language.UNKNOWN:
                    continue
                if should_skip_file(entry, cfg.exclude_patterns):
                    self.stats.files_skipped += 1
                    logger.debug(f"Skipped (pattern): {entry}")
                    continue
                yield SourceFile(path=entry, language=language)

    # ── Counting ───────────────────────────────────────────────

    def scan(self, inputs: Sequence[PathLike]) -> Aggregator:
        """
        Collect files from inputs and count the lines of each one.

        Files that cannot be read are logged and left out of the result.

        Returns:
            Aggregator holding one FileMetrics per counted file, in order
        """
        files = self.collect(inputs)
        aggregator = Aggregator()

        for source in files:
            try:
                lines = read_source_lines(
                    source.path,
                    max_size_bytes=self.config.max_file_size_bytes,
                    encoding=self.config.encoding,
                )
            except FileAccessError as e:
                self.stats.files_errored += 1
                logger.warning(f"Skipping {e.filepath}: {e.reason}")
                continue

            metrics = aggregator.add(source.display_path, source.language, lines)
            self.stats.files_scanned += 1
            logger.debug(
                f"Counted {metrics.path}: {metrics.code_count} code, "
                f"{metrics.comment_count} comment, {metrics.doc_comment_count} doc, "
                f"{metrics.blank_count} blank"
            )

        stats = self.stats
        logger.info(
            f"Scan complete: {stats.files_scanned}/{stats.files_found} counted, "
            f"{stats.files_skipped} skipped, {stats.files_errored} errors, "
            f"{stats.inputs_missing} missing input(s)"
            + (" (max files limit reached)" if stats.limit_reached else "")
        )
        return aggregator
