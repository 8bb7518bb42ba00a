"""Remote commands: add-remote, add-push-url, list-remotes, remove-remote.

These edit the remotes of a working repository (``--path`` or the current
directory) so they point at hub members.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from localhub.cli.common import (
    cli_error_handler,
    format_option,
    hub_path_option,
    target_path_option,
)
from localhub.cli.context import get_cli_context
from localhub.cli.output import (
    OutputFormat,
    format_info,
    format_json,
    format_success,
    format_table,
    format_warning,
)
from localhub.hub import HubManager
from localhub.remote import RemoteManager, RemoteSummary


def _remote_name_option(help_text: str) -> Callable[..., Any]:
    return click.option(
        "-r",
        "--remote-name",
        "remote_name",
        default=None,
        help=help_text,
    )


def _remote_rows(remotes: list[RemoteSummary]) -> list[list[str]]:
    rows: list[list[str]] = []
    for remote in remotes:
        rows.append([remote.name, "fetch", remote.url or "N/A"])
        for push_url in remote.push_urls:
            rows.append([remote.name, "push", push_url])
    return rows


@click.command("add-remote")
@click.argument("name")
@_remote_name_option("Remote name (default: local-hub).")
@target_path_option
@hub_path_option
@click.pass_context
def add_remote(
    ctx: click.Context,
    name: str,
    remote_name: str | None,
    path: Path | None,
    hub_path: Path | None,
) -> None:
    """Add hub repository NAME as a new remote of the working repository.

    Examples:
        localhub add-remote my-project
        localhub add-remote my-project --remote-name backup --path ~/src/proj
    """
    with cli_error_handler():
        cli_ctx = get_cli_context(ctx)
        remote_name = remote_name or cli_ctx.config.remotes.hub_remote_name

        hub_repo_path = HubManager(cli_ctx.hub_root(hub_path)).repo_path(name)
        RemoteManager(cli_ctx.target_path(path)).add_remote(
            hub_repo_path, remote_name=remote_name
        )

        click.echo(format_success(f"Added remote '{remote_name}' -> {hub_repo_path}"))
        click.echo(
            format_info(
                f"Use 'git push {remote_name} <branch>' to push to the local backup"
            )
        )


@click.command("add-push-url")
@click.argument("name")
@_remote_name_option("Remote name (default: origin).")
@target_path_option
@hub_path_option
@click.pass_context
def add_push_url(
    ctx: click.Context,
    name: str,
    remote_name: str | None,
    path: Path | None,
    hub_path: Path | None,
) -> None:
    """Add hub repository NAME as an extra push URL of an existing remote.

    Every later 'git push <remote>' also pushes to the hub.

    Examples:
        localhub add-push-url my-project
        localhub add-push-url my-project --remote-name upstream
    """
    with cli_error_handler():
        cli_ctx = get_cli_context(ctx)
        remote_name = remote_name or cli_ctx.config.remotes.push_remote_name

        hub_repo_path = HubManager(cli_ctx.hub_root(hub_path)).repo_path(name)
        RemoteManager(cli_ctx.target_path(path)).add_push_url(
            hub_repo_path, remote_name=remote_name
        )

        click.echo(
            format_success(f"Added local backup push URL for remote '{remote_name}'")
        )
        click.echo(
            format_info(
                f"Every 'git push {remote_name}' will also push to {hub_repo_path}"
            )
        )


@click.command("list-remotes")
@format_option
@target_path_option
@click.pass_context
def list_remotes(ctx: click.Context, fmt: str, path: Path | None) -> None:
    """List the remotes of the working repository.

    Examples:
        localhub list-remotes
        localhub list-remotes --format json
    """
    with cli_error_handler():
        remotes = RemoteManager(get_cli_context(ctx).target_path(path)).list_remotes()

        if fmt == OutputFormat.JSON.value:
            click.echo(format_json([remote.to_dict() for remote in remotes]))
            return

        if not remotes:
            click.echo(format_warning("No remotes in repository"))
            return

        click.echo(format_table(["Remote", "Type", "URL"], _remote_rows(remotes)))


@click.command("remove-remote")
@click.argument("remote_name")
@target_path_option
@click.pass_context
def remove_remote(ctx: click.Context, remote_name: str, path: Path | None) -> None:
    """Remove remote REMOTE_NAME from the working repository.

    Examples:
        localhub remove-remote local-hub
    """
    with cli_error_handler():
        RemoteManager(get_cli_context(ctx).target_path(path)).remove_remote(
            remote_name
        )
        click.echo(format_success(f"Remote '{remote_name}' removed"))
