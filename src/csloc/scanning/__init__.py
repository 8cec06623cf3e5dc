"""File discovery and reading for C/C++ sources."""

from .languages import EXTENSIONS, SUPPORTED_EXTENSIONS, detect_language, is_supported
from .scanner import ScanStats, SourceFile, SourceScanner

__all__ = [
    "EXTENSIONS",
    "SUPPORTED_EXTENSIONS",
    "detect_language",
    "is_supported",
    "ScanStats",
    "SourceFile",
    "SourceScanner",
]
