"""Output formatting for tsguard CLI commands."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from tsguard.cli.errors import print_error_panel
from tsguard.pipeline import FileOutcome


class OutputFormatter:
    """Formats generation outcomes for the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialise the formatter.

        Args:
            console: Console to print to (default: stderr, keeping stdout for guards)

        """
        self._console = console or Console(stderr=True)

    def format_outcomes(self, outcomes: list[FileOutcome]) -> None:
        """Print a summary table followed by one panel per failed file.

        Panels are titled by the kind of failure (syntax, extraction or
        generation) and list the offending source file first.
        """
        table = Table(
            title="Guard Generation Summary",
            show_header=True,
            header_style="bold magenta",
        )
        table.add_column("Source", style="cyan", no_wrap=True)
        table.add_column("Status")
        table.add_column("Guards", justify="right")
        table.add_column("Output", style="blue")

        for outcome in outcomes:
            status = "[green]ok[/green]" if outcome.success else "[red]failed[/red]"
            output = str(outcome.output) if outcome.output is not None else "-"
            table.add_row(
                str(outcome.source), status, str(len(outcome.interfaces)), output
            )

        self._console.print(table)

        for outcome in outcomes:
            if outcome.error is not None:
                print_error_panel(
                    outcome.error, source=outcome.source, target=self._console
                )
