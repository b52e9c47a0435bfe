"""CLI command implementations for tsguard."""

from tsguard.cli.errors import cli_error_handler, print_error_panel
from tsguard.cli.generate import build_config, generate_guards_command

__all__ = [
    "build_config",
    "cli_error_handler",
    "generate_guards_command",
    "print_error_panel",
]
