"""CLI entry point for localhub.

This module defines the Click-based command-line interface for localhub.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from dotenv import load_dotenv

from localhub.logging import bind_context, configure_logging

# Load LOCALHUB_* variables from a .env file in the current directory before
# any configuration is read
load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

from localhub import __version__  # noqa: E402
from localhub.cli.commands import (  # noqa: E402
    add_push_url,
    add_remote,
    create,
    delete,
    info,
    init,
    list_remotes,
    list_repos,
    remove_remote,
    search,
)
from localhub.cli.context import CLIContext, ExitCode  # noqa: E402
from localhub.cli.output import format_error  # noqa: E402
from localhub.config import load_config  # noqa: E402
from localhub.exceptions import ConfigError  # noqa: E402


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="localhub")
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(exists=False, path_type=str),
    default=None,
    help="Path to config file (overrides ~/.config/localhub/config.yaml).",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG).",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    default=False,
    help="Only log errors.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: str | None,
    verbose: int,
    quiet: bool,
) -> None:
    """localhub - manage local bare Git repositories as a backup hub."""
    ctx.ensure_object(dict)

    # Load configuration first (before logging setup)
    config_path = Path(config_file) if config_file else None
    try:
        config = load_config(config_path)
    except ConfigError as e:
        details = []
        if e.field:
            details.append(f"Field: {e.field}")
        if e.value is not None:
            details.append(f"Value: {e.value}")
        click.echo(format_error(e.message, details=details or None), err=True)
        ctx.exit(ExitCode.FAILURE)

    ctx.obj["cli_ctx"] = CLIContext(config=config)

    # Priority: quiet > verbose > config
    verbosity_map = {
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
    }

    if quiet:
        level = logging.ERROR
    elif verbose > 0:
        level = logging.INFO if verbose == 1 else logging.DEBUG
    else:
        level = verbosity_map.get(config.verbosity, logging.WARNING)

    configure_logging(level=level)

    # If no command is given, show help
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    bind_context(command=ctx.invoked_subcommand)


# Register commands
cli.add_command(init)
cli.add_command(create)
cli.add_command(list_repos)
cli.add_command(search)
cli.add_command(info)
cli.add_command(delete)
cli.add_command(add_remote)
cli.add_command(add_push_url)
cli.add_command(list_remotes)
cli.add_command(remove_remote)

if __name__ == "__main__":
    cli()
