"""CLI utilities for localhub.

This module provides CLI-specific utilities including context management,
output formatting, and error handling.
"""

from __future__ import annotations

from localhub.cli.common import cli_error_handler
from localhub.cli.context import CLIContext, ExitCode, get_cli_context
from localhub.cli.output import OutputFormat

__all__ = [
    "CLIContext",
    "ExitCode",
    "OutputFormat",
    "cli_error_handler",
    "get_cli_context",
]
