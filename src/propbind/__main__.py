"""Main entry point for the propbind command line.

Commands:
- sources: print the property sources loaded from configuration files
- extensions: list the file extensions the bundled loaders accept
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from propbind.cli import list_extensions_command, show_sources_command

app = typer.Typer(name="propbind", no_args_is_help=True)


@app.command()
def sources(
    files: Annotated[
        list[Path],
        typer.Argument(
            help="Configuration files to load",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
            case_sensitive=False,
        ),
    ] = "WARNING",
) -> None:
    """Load configuration files and print their property sources.

    Example:
        propbind sources config/application.yml config/overrides.json

    """
    show_sources_command(files, log_level)


@app.command()
def extensions(
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
            case_sensitive=False,
        ),
    ] = "WARNING",
) -> None:
    """List the file extensions property sources can be loaded from."""
    list_extensions_command(log_level)


if __name__ == "__main__":
    app()
