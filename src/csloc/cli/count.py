"""Count command: classify and report lines of C/C++ sources."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from .. import __version__
from ..exceptions import CslocError
from ..formatters import get_formatter
from ..logging_config import setup_logging
from ..scanning.scanner import SourceScanner
from . import app
from ._common import err_console, resolve_config


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"csloc {__version__}")
        raise typer.Exit()


@app.command()
def count(
    inputs: List[Path] = typer.Argument(
        ...,
        help="Source files and/or directories to count",
        show_default=False,
    ),
    recursive: bool = typer.Option(
        False,
        "--recursive",
        "-r",
        help="Descend into subdirectories of directory inputs",
    ),
    sort: Optional[str] = typer.Option(
        None,
        "--sort",
        "-s",
        help="Sort ascending by key: f(ilename) t(ype) c(omments) d(oc) b(lank) s(loc) a(ll)",
        metavar="KEY",
    ),
    sort_desc: Optional[str] = typer.Option(
        None,
        "--sort-desc",
        "-S",
        help="Sort descending by key (same keys as --sort)",
        metavar="KEY",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: rich, json, csv, quiet",
    ),
    exclude: List[str] = typer.Option(
        [],
        "--exclude",
        "-e",
        help="Extra glob pattern to exclude (repeatable)",
    ),
    include_unknown: bool = typer.Option(
        False,
        "--include-unknown",
        help="Count explicitly named files with unrecognized extensions",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also write log records to this file",
        dir_okay=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """
    Count blank, code, comment and doc-comment lines in C/C++ sources.

    Files are reported in the order given; directories are listed in name
    order. A SUM row is shown when more than one file is counted.

    [bold cyan]Examples:[/bold cyan]

      csloc main.cpp util.h

      csloc -r src -S s

      csloc -r src --format json
    """
    if sort is not None and sort_desc is not None:
        raise typer.BadParameter("use either --sort or --sort-desc, not both")

    try:
        settings = resolve_config(
            config=config,
            recursive=recursive,
            sort=sort,
            sort_desc=sort_desc,
            output_format=output_format,
            include_unknown=include_unknown,
            extra_excludes=exclude,
            verbose=verbose,
            quiet=quiet,
        )
    except CslocError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    try:
        logger = setup_logging(
            verbose=settings.verbosity == "verbose",
            quiet=settings.verbosity == "quiet",
            log_file=str(log_file) if log_file else None,
        )
    except OSError as e:
        reason = escape(f"cannot open log file {log_file}: {e}")
        err_console.print(f"[red]Error:[/red] {reason}")
        raise typer.Exit(1)

    scanner = SourceScanner(settings)
    result = scanner.scan(inputs)

    if len(result) == 0:
        err_console.print("[yellow]No C/C++ source files to count.[/yellow]")
        raise typer.Exit(1)

    if settings.sort is not None:
        files = result.sorted(settings.sort, descending=settings.sort_descending)
    else:
        files = list(result.files)

    get_formatter(settings.output_format).render(files, result.totals())
    logger.debug(f"Reported {len(files)} file(s) as {settings.output_format}")
