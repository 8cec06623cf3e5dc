"""Shared CLI helpers."""

import dataclasses
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console

from ..config import CountConfig, load_config

console = Console()
err_console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    recursive: bool = False,
    sort: Optional[str] = None,
    sort_desc: Optional[str] = None,
    output_format: Optional[str] = None,
    include_unknown: bool = False,
    extra_excludes: Sequence[str] = (),
    verbose: bool = False,
    quiet: bool = False,
) -> CountConfig:
    """Build a CountConfig from CLI options.

    Flags left at their defaults do not override config files or the
    environment.
    """
    overrides = {}
    if recursive:
        overrides["recursive"] = True
    if include_unknown:
        overrides["include_unknown"] = True
    if sort is not None:
        overrides["sort_key"] = sort
        overrides["sort_descending"] = False
    elif sort_desc is not None:
        overrides["sort_key"] = sort_desc
        overrides["sort_descending"] = True
    if output_format is not None:
        overrides["output_format"] = output_format
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True

    settings = load_config(config_file=config, **overrides)
    if extra_excludes:
        settings = dataclasses.replace(
            settings, exclude_patterns=[*settings.exclude_patterns, *extra_excludes]
        )
    return settings
