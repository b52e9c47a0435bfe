"""CLI command implementation for generating type guards."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import typer

from tsguard.cli.errors import cli_error_handler
from tsguard.cli.formatting import OutputFormatter
from tsguard.config import DebugOption, GuardGenConfig, load_config_file
from tsguard.logging import setup_logging
from tsguard.pipeline import GuardPipeline

logger = logging.getLogger(__name__)


def build_config(
    config_path: Path | None,
    overrides: dict[str, Any],
) -> GuardGenConfig:
    """Build the run configuration from an optional file and CLI overrides.

    Options given on the command line take precedence over the file; options
    left unset (None or empty) keep the file's or the default value.

    Raises:
        ConfigError: If the file or the merged properties are invalid

    """
    properties = load_config_file(config_path) if config_path is not None else {}
    for key, value in overrides.items():
        if value is None or value == []:
            continue
        properties[key] = value
    return GuardGenConfig.from_properties(properties)


def generate_guards_command(  # noqa: PLR0913 - mirrors the CLI options
    files: list[Path] | None,
    output: str | None,
    output_dir: Path | None,
    debug: list[DebugOption] | None,
    encoding: str | None,
    dialect: str | None,
    config_path: Path | None,
    verbose: bool = False,
    log_level: str | None = None,
) -> None:
    """Generate type guards for every interface in the given files.

    Raises:
        typer.Exit: With code 1 on usage, read, configuration or extraction
            failures

    """
    setup_logging(level="DEBUG" if verbose else log_level)

    with cli_error_handler():
        config = build_config(
            config_path,
            {
                "output_pattern": output,
                "output_dir": output_dir,
                "debug": [option.value for option in debug or []],
                "encoding": encoding,
                "dialect": dialect,
            },
        )
        outcomes = GuardPipeline(config).run(files or [])

    OutputFormatter().format_outcomes(outcomes)

    failed = [outcome for outcome in outcomes if not outcome.success]
    if failed:
        logger.error("Guard generation failed for %d file(s)", len(failed))
        raise typer.Exit(1)
