"""CLI entry point: registers the count command."""

import typer

app = typer.Typer(
    name="csloc",
    help="csloc - count blank, code, comment and doc-comment lines in C/C++ sources",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import commands to register them
from .count import count as _count  # noqa: F401, E402
