"""Extension-based detection of C/C++ file types.

Adding a new extension:
  1. Add it to the matching tuple in EXTENSIONS below.
  2. That's it. Detection and directory filtering pick it up automatically.
"""

from pathlib import Path
from typing import Union

from ..counting.models import Language

EXTENSIONS: dict[Language, tuple[str, ...]] = {
    Language.C: (".c",),
    Language.CPP: (".cpp", ".cc", ".cxx", ".c++"),
    Language.H: (".h",),
    Language.HPP: (".hpp", ".hh", ".hxx", ".h++"),
}

_BY_SUFFIX = {ext: lang for lang, exts in EXTENSIONS.items() for ext in exts}

SUPPORTED_EXTENSIONS = frozenset(_BY_SUFFIX)


def detect_language(path: Union[str, Path]) -> Language:
    """Map a file name to its Language; unknown extensions give Language.UNKNOWN."""
    return _BY_SUFFIX.get(Path(path).suffix.lower(), Language.UNKNOWN)


def is_supported(path: Union[str, Path]) -> bool:
    return detect_language(path) is not Language.UNKNOWN
