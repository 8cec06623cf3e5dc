"""Exception hierarchy for csloc."""

from .base import CslocError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)
from .scanning import (
    FileAccessError,
    ScanError,
    UnsupportedLanguageError,
)

__all__ = [
    "CslocError",
    "ScanError",
    "FileAccessError",
    "UnsupportedLanguageError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
