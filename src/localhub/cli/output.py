"""Output formatting utilities for localhub CLI.

This module defines output format options and formatting helpers for CLI commands.
"""

from __future__ import annotations

import json
from datetime import datetime
from enum import Enum
from typing import Any

from rich.filesize import decimal

__all__ = [
    "OutputFormat",
    "TIMESTAMP_FORMAT",
    "format_count",
    "format_datetime",
    "format_error",
    "format_info",
    "format_json",
    "format_size",
    "format_success",
    "format_table",
    "format_warning",
]

#: Timestamp layout used in listings
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class OutputFormat(str, Enum):
    """Supported output formats for listing commands.

    Values:
        TEXT: Human-readable output (default).
        JSON: Machine-readable JSON output.
    """

    TEXT = "text"
    JSON = "json"


def format_error(
    message: str, details: list[str] | None = None, suggestion: str | None = None
) -> str:
    """Format an error message with optional details and suggestion.

    Args:
        message: Primary error message.
        details: Optional list of detail lines to include.
        suggestion: Optional suggestion for resolving the error.

    Returns:
        Formatted error string with details and suggestion if provided.

    Example:
        >>> print(format_error(
        ...     "Repository 'proj' does not exist in hub",
        ...     suggestion="Run 'localhub create proj' to create it first",
        ... ))
        Error: Repository 'proj' does not exist in hub
        Suggestion: Run 'localhub create proj' to create it first
    """
    lines = [f"Error: {message}"]

    if details:
        for detail in details:
            lines.append(f"  {detail}")

    if suggestion:
        lines.append(f"Suggestion: {suggestion}")

    return "\n".join(lines)


def format_success(message: str) -> str:
    """Format a success message.

    Example:
        >>> format_success("Repository 'proj' deleted")
        "Success: Repository 'proj' deleted"
    """
    return f"Success: {message}"


def format_warning(message: str) -> str:
    """Format a warning message.

    Example:
        >>> format_warning("No repositories in hub")
        'Warning: No repositories in hub'
    """
    return f"Warning: {message}"


def format_info(message: str) -> str:
    """Format an informational hint.

    Example:
        >>> format_info("Deletion cancelled")
        'Info: Deletion cancelled'
    """
    return f"Info: {message}"


def format_json(data: Any) -> str:
    """Format data as indented JSON.

    Raises:
        TypeError: If data is not JSON-serializable.
    """
    return json.dumps(data, indent=2)


def format_size(size: int | None) -> str:
    """Human-readable decimal size, or N/A when unknown.

    Example:
        >>> format_size(1500)
        '1.5 kB'
    """
    if size is None:
        return "N/A"
    return decimal(size)


def format_count(count: int | None) -> str:
    return "N/A" if count is None else str(count)


def format_datetime(value: datetime | None) -> str:
    if value is None:
        return "N/A"
    return value.strftime(TIMESTAMP_FORMAT)


def format_table(headers: list[str], rows: list[list[str]]) -> str:
    """Format data as a simple text table with pipe separators.

    Args:
        headers: Column headers.
        rows: Data rows, each row should have same length as headers.

    Returns:
        Formatted table string with columns separated by pipes.

    Example:
        >>> print(format_table(["Name", "URL"], [["origin", "git@host:proj"]]))
        Name   | URL
        origin | git@host:proj
    """
    if not headers:
        return ""

    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            if i < len(col_widths):
                col_widths[i] = max(col_widths[i], len(cell))

    lines = []

    header_parts = [h.ljust(col_widths[i]) for i, h in enumerate(headers)]
    lines.append(" | ".join(header_parts).rstrip())

    for row in rows:
        row_parts = [
            cell.ljust(col_widths[i]) if i < len(col_widths) else cell
            for i, cell in enumerate(row)
        ]
        lines.append(" | ".join(row_parts).rstrip())

    return "\n".join(lines)
