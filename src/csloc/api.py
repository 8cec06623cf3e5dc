"""Public API for csloc.

Example:
    >>> from csloc import count_paths, count_text
    >>>
    >>> result = count_paths(["src"], recursive=True)
    >>> for metrics in result.sorted("code_count", descending=True):
    ...     print(metrics.path, metrics.code_count)
    >>>
    >>> count_text("int x; // set x\\n", path="x.c").code_count
    1
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Optional, Union

from .config import load_config
from .counting.aggregator import Aggregator, count_lines
from .counting.models import FileMetrics, Language
from .file_ops import split_lines
from .logging_config import get_logger
from .scanning.languages import detect_language
from .scanning.scanner import SourceScanner

logger = get_logger(__name__)


def count_paths(
    paths: Sequence[Union[str, Path]],
    config_file: Optional[Path] = None,
    **overrides,
) -> Aggregator:
    """Count the lines of every C/C++ file reachable from ``paths``.

    Args:
        paths: Files and directories, in report order
        config_file: Optional explicit config file path
        **overrides: Configuration overrides (e.g., recursive=True)

    Returns:
        Aggregator with one FileMetrics per counted file

    Raises:
        ConfigurationError: If configuration is invalid
    """
    config = load_config(config_file=config_file, **overrides)
    logger.debug(f"Counting {len(paths)} input(s)")
    return SourceScanner(config).scan(paths)


def count_text(
    text: str,
    path: str = "<string>",
    language: Optional[Language] = None,
) -> FileMetrics:
    """Count the lines of in-memory source text.

    The language is detected from ``path`` when not given.
    """
    if language is None:
        language = detect_language(path)
    return count_lines(path, language, split_lines(text))
