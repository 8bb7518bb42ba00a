from __future__ import annotations

import contextlib
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any, TypeVar

import click

from localhub.cli.context import ExitCode
from localhub.cli.output import OutputFormat, format_error
from localhub.exceptions import (
    ConfigError,
    GitError,
    HubIOError,
    InvalidRepositoryError,
    LocalHubError,
    NameValidationError,
    NotARepositoryError,
    PathResolutionError,
    PushUrlExistsError,
    RemoteExistsError,
    RemoteNotFoundError,
    RepositoryExistsError,
    RepositoryNotFoundError,
)
from localhub.logging import get_logger

F = TypeVar("F", bound=Callable[..., Any])

#: Program name used in remediation hints
PROG_NAME = "localhub"


def hub_path_option(f: F) -> F:
    """Add ``--hub-path`` to a command."""
    return click.option(
        "--hub-path",
        "hub_path",
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        help="Hub root directory (default: ~/.local-git-hub).",
    )(f)


def target_path_option(f: F) -> F:
    """Add ``-p/--path`` to a command."""
    return click.option(
        "-p",
        "--path",
        "path",
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        help="Working repository path (default: current directory).",
    )(f)


def format_option(f: F) -> F:
    """Add ``-f/--format`` to a listing command."""
    return click.option(
        "-f",
        "--format",
        "fmt",
        type=click.Choice([fmt.value for fmt in OutputFormat]),
        default=OutputFormat.TEXT.value,
        help="Output format.",
    )(f)


def _suggestion_for(error: LocalHubError) -> str | None:
    """Remediation hint for common errors."""
    if isinstance(error, RepositoryNotFoundError):
        if error.repo_name:
            return f"Run '{PROG_NAME} create {error.repo_name}' to create it first"
        return f"Run '{PROG_NAME} list' to see available repositories"
    if isinstance(error, RepositoryExistsError):
        return f"Run '{PROG_NAME} info {error.repo_name}' to inspect it"
    if isinstance(error, InvalidRepositoryError):
        return "Inspect or remove the directory manually"
    if isinstance(error, NameValidationError):
        return 'Use a name without / \\ : * ? " < > | that is not "." or ".."'
    if isinstance(error, NotARepositoryError):
        return "Run the command inside a git repository or pass --path"
    if isinstance(error, RemoteExistsError):
        return (
            f"Choose another --remote-name or run "
            f"'{PROG_NAME} remove-remote {error.remote_name}' first"
        )
    if isinstance(error, RemoteNotFoundError):
        return f"Run '{PROG_NAME} list-remotes' to see configured remotes"
    if isinstance(error, PushUrlExistsError):
        return "Nothing to do; the hub repository already receives pushes"
    if isinstance(error, PathResolutionError):
        return "Pass --hub-path or set LOCALHUB_HUB_PATH"
    if isinstance(error, HubIOError):
        return "Check that the hub directory is writable"
    return None


@contextlib.contextmanager
def cli_error_handler() -> Generator[None, None, None]:
    """Context manager for common CLI error handling.

    Handles common error patterns across CLI commands:
    - KeyboardInterrupt: Exit with code 130
    - GitError: Format error with operation details and a suggestion
    - LocalHubError: Format error with a suggestion
    - Generic exceptions: Log and format error

    Example:
        >>> with cli_error_handler():
        >>>     hub.create(name)
    """
    logger = get_logger(__name__)

    try:
        yield
    except KeyboardInterrupt:
        click.echo("\n\nInterrupted by user.", err=True)
        raise SystemExit(ExitCode.INTERRUPTED) from None
    except (click.exceptions.Exit, click.Abort, click.ClickException):
        raise
    except ConfigError as e:
        details = []
        if e.field:
            details.append(f"Field: {e.field}")
        if e.value is not None:
            details.append(f"Value: {e.value}")
        click.echo(format_error(e.message, details=details or None), err=True)
        raise SystemExit(ExitCode.FAILURE) from e
    except GitError as e:
        show_operation = e.operation and not isinstance(
            e, (NotARepositoryError, RemoteExistsError, RemoteNotFoundError)
        )
        error_msg = format_error(
            e.message,
            details=[f"Operation: {e.operation}"] if show_operation else None,
            suggestion=_suggestion_for(e),
        )
        click.echo(error_msg, err=True)
        raise SystemExit(ExitCode.FAILURE) from e
    except LocalHubError as e:
        error_msg = format_error(e.message, suggestion=_suggestion_for(e))
        click.echo(error_msg, err=True)
        raise SystemExit(ExitCode.FAILURE) from e
    except Exception as e:
        logger.exception("Unexpected error in command")
        click.echo(f"Error: {e!s}", err=True)
        raise SystemExit(ExitCode.FAILURE) from e
