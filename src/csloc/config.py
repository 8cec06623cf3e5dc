"""Configuration loading and management for csloc.

Configuration sources are merged in priority order:
    1. Defaults (defined in CountConfig)
    2. Global config (~/.csloc.toml)
    3. Project config (./csloc.toml)
    4. Explicit config file
    5. Environment variables (CSLOC_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, recursive=True)
    >>> config.verbosity
    'verbose'
    >>> config.recursive
    True
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .counting.sorting import SortKey
from .exceptions import ConfigurationError, InvalidConfigError

# Type aliases for clarity
Verbosity = Literal["quiet", "normal", "verbose"]

OUTPUT_FORMATS = ("rich", "json", "csv", "quiet")

GLOBAL_CONFIG_NAME = ".csloc.toml"
PROJECT_CONFIG_NAME = "csloc.toml"
ENV_PREFIX = "CSLOC_"


@dataclass(frozen=True)
class CountConfig:
    """Configuration for a counting run.

    All fields have sensible defaults. Users typically override only a few
    fields via CLI flags or a config file.

    Attributes:
        Traversal:
            recursive: Descend into subdirectories of directory inputs
            exclude_patterns: Glob patterns (matched from the right) to skip
            include_unknown: Count explicitly named files with unknown extensions
            allow_hidden_files: Include files and directories starting with "."
            follow_symlinks: Follow symbolic links during traversal

        Limits:
            max_file_size_mb: Files larger than this are skipped (MB)
            max_files: Stop collecting after this many files

        Reading:
            encoding: Text encoding used to decode sources (errors replaced)

        Output:
            sort_key: Column to order the report by (None = traversal order)
            sort_descending: Reverse the sort order
            output_format: One of rich, json, csv, quiet
            verbosity: Logging verbosity level
    """

    # Traversal
    recursive: bool = False
    exclude_patterns: list[str] = field(
        default_factory=lambda: [
            ".git/*",
            "build/*",
            "cmake-build-*/*",
            "CMakeFiles/*",
            "_deps/*",
            "node_modules/*",
        ]
    )
    include_unknown: bool = False
    allow_hidden_files: bool = False
    follow_symlinks: bool = False

    # Limits
    max_file_size_mb: float = 10.0
    max_files: int = 100000

    # Reading
    encoding: str = "utf-8"

    # Output
    sort_key: Optional[str] = None
    sort_descending: bool = False
    output_format: str = "rich"
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._check_types()

        if self.max_file_size_mb <= 0:
            raise InvalidConfigError("max_file_size_mb", self.max_file_size_mb, "must be positive")
        if self.max_files < 1:
            raise InvalidConfigError("max_files", self.max_files, "must be at least 1")

        if self.output_format not in OUTPUT_FORMATS:
            raise InvalidConfigError(
                "output_format", self.output_format, f"expected one of {', '.join(OUTPUT_FORMATS)}"
            )
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError("verbosity", self.verbosity, "expected quiet, normal or verbose")

        # Raises InvalidConfigError for unknown keys
        if self.sort_key is not None:
            SortKey.parse(self.sort_key)

        try:
            "".encode(self.encoding)
        except LookupError:
            raise InvalidConfigError("encoding", self.encoding, "unknown text encoding")

    def _check_types(self) -> None:
        # TOML values arrive untyped; bool is rejected where a number is expected
        for name, expected in _FIELD_TYPES.items():
            value = getattr(self, name)
            if value is None and name in _OPTIONAL_FIELDS:
                continue
            wrong_bool = isinstance(value, bool) and bool not in expected
            if wrong_bool or not isinstance(value, expected):
                raise InvalidConfigError(name, value, f"expected {_type_names(expected)}")

        if not all(isinstance(p, str) for p in self.exclude_patterns):
            raise InvalidConfigError(
                "exclude_patterns", self.exclude_patterns, "expected a list of strings"
            )

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)

    @property
    def sort(self) -> Optional[SortKey]:
        """Parsed sort key, or None when the report keeps traversal order."""
        if self.sort_key is None:
            return None
        return SortKey.parse(self.sort_key)


_FIELD_TYPES: dict[str, tuple[type, ...]] = {
    "recursive": (bool,),
    "exclude_patterns": (list,),
    "include_unknown": (bool,),
    "allow_hidden_files": (bool,),
    "follow_symlinks": (bool,),
    "max_file_size_mb": (int, float),
    "max_files": (int,),
    "encoding": (str,),
    "sort_key": (str,),
    "sort_descending": (bool,),
    "output_format": (str,),
    "verbosity": (str,),
}

_OPTIONAL_FIELDS = frozenset({"sort_key"})


def _type_names(types: tuple[type, ...]) -> str:
    return " or ".join(t.__name__ for t in types)


def load_config(config_file: Optional[Path] = None, **overrides) -> CountConfig:
    """Load configuration with auto-discovery and merging.

    Configuration sources are merged in priority order (lowest to highest):
        1. Defaults (CountConfig field defaults)
        2. Global config (~/.csloc.toml)
        3. Project config (./csloc.toml)
        4. Explicit config file (if config_file provided)
        5. Environment variables (CSLOC_* prefix)
        6. CLI overrides (kwargs)

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated CountConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.exists():
        merged.update(_read_config_file(global_config, "global"))

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_read_config_file(project_config, "project"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_read_config_file(config_file, "explicit"))

    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    # None means "flag not given" and must not mask lower layers
    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return CountConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _read_config_file(path: Path, label: str) -> dict[str, Any]:
    try:
        data = _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid {label} config '{path}': {e}")

    # Settings may live at the top level or under a [csloc] table
    section = data.get("csloc", data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"Invalid {label} config '{path}': [csloc] must be a table")
    return dict(section)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from CSLOC_* environment variables.

    Supported environment variables:
        CSLOC_RECURSIVE: bool (true/false/1/0)
        CSLOC_INCLUDE_UNKNOWN: bool
        CSLOC_ALLOW_HIDDEN_FILES: bool
        CSLOC_FOLLOW_SYMLINKS: bool
        CSLOC_MAX_FILE_SIZE_MB: float
        CSLOC_MAX_FILES: int
        CSLOC_ENCODING: str
        CSLOC_SORT_KEY: str
        CSLOC_SORT_DESCENDING: bool
        CSLOC_OUTPUT_FORMAT: rich/json/csv/quiet
        CSLOC_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any CSLOC_* vars found.
    """
    type_hints = get_type_hints(CountConfig)

    result: dict[str, Any] = {}

    for field_name in CountConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint, field_name)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise InvalidConfigError(field_name, env_value, f"{env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any, field_name: str) -> Any:
    """Parse environment variable string to the correct type.

    Args:
        value: Raw string from environment
        type_hint: Type annotation from dataclass
        field_name: Field name for error messages

    Returns:
        Parsed value or None if can't parse

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Handle Optional[X] which is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    # Comma-separated lists (exclude_patterns)
    if origin is list or type_hint is list:
        return [part.strip() for part in value.split(",") if part.strip()]

    # Bool: accept true/false/1/0/yes/no
    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    # String (including Literal types like Verbosity)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If tomllib/tomli not available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            # Fallback to tomli for Python 3.9-3.10
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)


default_config = CountConfig()
