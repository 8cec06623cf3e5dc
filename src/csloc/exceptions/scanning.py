"""Scanning-related exceptions: file access and file-type detection."""

from pathlib import Path

from .base import CslocError


class ScanError(CslocError):
    """Base class for errors raised while collecting or reading sources."""

    pass


class FileAccessError(ScanError):
    """Raised when a file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class UnsupportedLanguageError(ScanError):
    """Raised when a file extension does not map to a C/C++ language."""

    def __init__(self, filepath: Path, extension: str):
        super().__init__(
            f"Unsupported file type: {filepath}",
            details={"filepath": str(filepath), "extension": extension or "<none>"},
        )
        self.filepath = filepath
        self.extension = extension
