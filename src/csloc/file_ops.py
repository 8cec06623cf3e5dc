"""
Safe file operations for csloc.

Provides size-limited reading and line splitting for source files.
"""

from pathlib import Path
from typing import Optional

from .exceptions import FileAccessError


def split_lines(text: str) -> list[str]:
    """
    Split text into physical lines.

    ``\\n``, ``\\r\\n`` and ``\\r`` all end a line. A final terminator does
    not produce an extra empty line, so empty text has no lines. Form feeds
    and other characters that ``str.splitlines`` would treat as breaks stay
    inside their line.
    """
    if not text:
        return []
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def read_source_lines(
    filepath: Path,
    max_size_bytes: Optional[int] = None,
    encoding: str = "utf-8",
    errors: str = "replace",
) -> list[str]:
    """
    Read a source file and return its physical lines.

    Args:
        filepath: File to read
        max_size_bytes: Reject files larger than this (None = no limit)
        encoding: Text encoding
        errors: How to handle encoding errors

    Returns:
        The file's lines, without terminators

    Raises:
        FileAccessError: If the file is too large or cannot be read
    """
    try:
        if max_size_bytes is not None:
            size = filepath.stat().st_size
            if size > max_size_bytes:
                raise FileAccessError(
                    filepath, f"File too large ({size} bytes, limit {max_size_bytes})"
                )
        # newline="" keeps \r so split_lines sees the raw terminators
        with open(filepath, encoding=encoding, errors=errors, newline="") as f:
            return split_lines(f.read())
    except OSError as e:
        raise FileAccessError(filepath, f"OS error: {e}")


def should_skip_file(filepath: Path, exclude_patterns: list[str]) -> bool:
    """
    Check if a file should be skipped based on exclusion patterns.

    Args:
        filepath: File to check
        exclude_patterns: List of glob patterns to exclude

    Returns:
        True if file should be skipped
    """
    for pattern in exclude_patterns:
        if filepath.match(pattern):
            return True
    return False


def should_skip_dir(dirpath: Path, exclude_patterns: list[str]) -> bool:
    """
    Check if a whole directory is excluded.

    A pattern of the form ``name/*`` excludes every directory matching
    ``name``, so nested trees under it are never walked.
    """
    for pattern in exclude_patterns:
        if pattern.endswith("/*") and dirpath.match(pattern[:-2]):
            return True
    return False
