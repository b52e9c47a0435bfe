"""Main entry point for tsguard.

tsguard reads TypeScript source files, extracts their top-level interface
declarations and writes a runtime type guard, ``is<Name>(value): value is
<Name>``, for each of them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv

from tsguard.cli import generate_guards_command
from tsguard.config import DebugOption

# Load environment variables (e.g. TSGUARD_ENV) from a .env file if it exists
_ = load_dotenv()

_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

app = typer.Typer(
    name="tsguard",
    help="Automatically generates TypeScript type guards for interfaces.",
    context_settings=_CONTEXT_SETTINGS,
    add_completion=False,
)


@app.command(context_settings=_CONTEXT_SETTINGS)
def generate(  # noqa: PLR0913 - CLI entry point with many options
    file: Annotated[
        list[Path] | None,
        typer.Option(
            "--file",
            "-f",
            help="Input source file. Can be specified multiple times.",
            show_default=False,
        ),
    ] = None,
    output: Annotated[
        str | None,
        typer.Option(
            "--output",
            "-o",
            help=(
                "Pattern for output file names. The string '<FILE>' is replaced "
                "by the name of the input file without extension. Use '-' to "
                "write to stdout."
            ),
            show_default="<FILE>-guard.ts",
            rich_help_panel="Output",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output-dir",
            help="Directory output file names are resolved against",
            file_okay=False,
            dir_okay=True,
            show_default="current directory",
            rich_help_panel="Output",
        ),
    ] = None,
    debug: Annotated[
        list[DebugOption] | None,
        typer.Option(
            "--debug",
            "-d",
            help="Debug output. 'ast' prints each source file's syntax tree to stdout.",
            case_sensitive=False,
        ),
    ] = None,
    encoding: Annotated[
        str | None,
        typer.Option("--encoding", help="Encoding of input and output files"),
    ] = None,
    dialect: Annotated[
        str | None,
        typer.Option(
            "--dialect",
            help="TypeScript dialect (typescript, tsx); detected from the extension",
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="YAML configuration file; command-line options take precedence",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output (sets log level to DEBUG)",
        ),
    ] = False,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            help="Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
            case_sensitive=False,
        ),
    ] = None,
) -> None:
    """Generate type guards for all interfaces in the specified files.

    The guard for an interface is named "is<Type name>", with the first letter
    of the type name capitalised.

    Example:
        tsguard -f src/models.ts -o "<FILE>.guards.ts"

    """
    generate_guards_command(
        file,
        output,
        output_dir,
        debug,
        encoding,
        dialect,
        config,
        verbose,
        log_level,
    )


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
