"""Terminal rendering of tsguard failures.

Every failure is shown as a red panel on stderr, titled by what went wrong,
with the fields the error carries (missing files, source line, offending
syntax kind) laid out as a grid rather than folded into one sentence.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

import typer
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tsguard.errors import (
    ConfigError,
    ConflictingDeclarationError,
    ExtractionError,
    GenerationError,
    ReadError,
    SourceSyntaxError,
    TsGuardError,
    UnsupportedSyntaxError,
    UsageError,
)

logger = logging.getLogger(__name__)
console = Console(stderr=True)


def error_title(error: TsGuardError) -> str:
    """Return the panel title for an error."""
    match error:
        case UsageError():
            return "Invalid usage"
        case ReadError():
            return "Cannot read source"
        case SourceSyntaxError():
            return "Syntax error"
        case ExtractionError():
            return "Extraction failed"
        case GenerationError():
            return "Generation failed"
        case ConfigError():
            return "Invalid configuration"
        case _:
            return "Guard generation failed"


def _details(error: TsGuardError) -> tuple[str, list[tuple[str, str]]]:
    """Split an error into a headline and labelled detail rows."""
    match error:
        case UsageError(missing=missing) if missing:
            rows = [("Missing", str(path)) for path in missing]
            return "Input file(s) not found", rows
        case ReadError(path=path, cause=cause):
            rows = [("File", str(path)), ("Cause", str(cause))]
            return "Failed to open source file", rows
        case UnsupportedSyntaxError():
            rows = [("Found", error.actual_kind), ("Expected", error.expected_kind)]
            if error.interface:
                rows.insert(0, ("Interface", error.interface))
            if error.line is not None:
                rows.append(("Line", str(error.line)))
            return f"Unsupported syntax: {error.context}", rows
        case ConflictingDeclarationError():
            rows = [("Interface", error.interface), ("Property", error.property_name)]
            if error.line is not None:
                rows.append(("Line", str(error.line)))
            return "Merged declarations disagree on a property", rows
        case SourceSyntaxError(line=line) if line is not None:
            return error.args[0], [("Line", str(line))]
        case _:
            return str(error), []


def describe_error(error: TsGuardError, source: Path | None = None) -> RenderableType:
    """Build the panel body for an error.

    Args:
        error: The failure to describe
        source: Input file the failure belongs to, if any

    Returns:
        A headline followed by a grid of the error's fields

    """
    headline, rows = _details(error)
    if source is not None:
        rows.insert(0, ("Source", str(source)))
    if not rows:
        return Text(headline, style="red")

    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="bold")
    grid.add_column()
    for label, value in rows:
        grid.add_row(label, Text(value))
    return Group(Text(headline, style="red"), grid)


def print_error_panel(
    error: TsGuardError, source: Path | None = None, target: Console | None = None
) -> None:
    """Display an error as a Rich panel (default: on stderr)."""
    (target or console).print(
        Panel(
            describe_error(error, source),
            title=f"❌ {error_title(error)}",
            border_style="red",
        )
    )


@contextmanager
def cli_error_handler() -> Generator[None]:
    """Show tsguard errors raised in the block as a panel and exit with code 1.

    Errors that are not TsGuardError are programming errors and propagate
    with their traceback.
    """
    try:
        yield
    except TsGuardError as e:
        logger.debug("Command failed", exc_info=True)
        print_error_panel(e)
        raise typer.Exit(1) from e
