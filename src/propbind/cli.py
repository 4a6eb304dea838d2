"""CLI command implementations for propbind."""

from __future__ import annotations

import logging
from collections.abc import Generator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import override

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from propbind.logging import setup_logging
from propbind.sources import FileResource, LoaderDirectory, PropertySource

logger = logging.getLogger(__name__)
console = Console()


class CLIError(Exception):
    """Exception for CLI-related errors with enhanced context."""

    def __init__(
        self,
        message: str,
        command: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialise CLI error with context.

        Args:
            message: Human-readable error message describing what went wrong
            command: Name of the CLI command that failed (e.g., "sources")
            original_error: The underlying exception that caused this CLI error

        """
        super().__init__(message)
        self.command = command
        self.original_error = original_error

    @override
    def __str__(self) -> str:
        base_message = super().__str__()
        if self.command:
            return f"CLI command '{self.command}' failed: {base_message}"
        return base_message


@contextmanager
def cli_error_handler(command: str, title: str) -> Generator[None]:
    """Show any exception as a Rich error panel and exit with code 1."""
    try:
        yield
    except CLIError as e:
        logger.error("%s: %s", title, e)
        console.print(
            Panel(f"[red]{escape(str(e))}[/red]", title=title, border_style="red")
        )
        raise typer.Exit(1) from e
    except Exception as e:
        cli_error = CLIError(str(e), command=command, original_error=e)
        logger.error("%s: %s", title, cli_error)
        console.print(
            Panel(
                f"[red]{escape(str(cli_error))}[/red]", title=title, border_style="red"
            )
        )
        raise typer.Exit(1) from cli_error


def _source_table(source: PropertySource) -> Table:
    table = Table(title=escape(source.name), title_justify="left")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value")
    for key, value in source.items():
        text = value if isinstance(value, str) else repr(value)
        table.add_row(escape(key), escape(text))
    return table


def show_sources_command(
    files: Sequence[Path],
    log_level: str = "INFO",
    directory: LoaderDirectory | None = None,
) -> None:
    """CLI command implementation for printing property sources of files.

    Args:
        files: Configuration files to load, in order
        log_level: Logging level
        directory: Loader directory, defaults to the bundled loaders

    """
    setup_logging(level=log_level)
    with cli_error_handler("sources", "Failed to load property sources"):
        directory = directory or LoaderDirectory.default()
        for path in files:
            resource = FileResource(path)
            sources = directory.load(resource, name=path.name)
            logger.info("Loaded %d property source(s) from %s", len(sources), path)
            for source in sources:
                console.print(_source_table(source))


def list_extensions_command(
    log_level: str = "INFO", directory: LoaderDirectory | None = None
) -> None:
    """CLI command implementation for listing supported file extensions."""
    setup_logging(level=log_level)
    with cli_error_handler("extensions", "Failed to list extensions"):
        directory = directory or LoaderDirectory.default()
        table = Table(title="Supported extensions")
        table.add_column("Extension", style="cyan")
        table.add_column("Loader")
        for extension, loader in sorted(directory.loaders.items()):
            table.add_row(extension, type(loader).__name__)
        console.print(table)
