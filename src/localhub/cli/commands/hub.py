"""Hub commands: init, create, list, search, info, delete.

Each command resolves the hub root from ``--hub-path``, the configuration,
or ``~/.local-git-hub``, in that order.
"""

from __future__ import annotations

from pathlib import Path

import click
from rich.markup import escape
from rich.table import Table

from localhub.cli.common import (
    PROG_NAME,
    cli_error_handler,
    format_option,
    hub_path_option,
)
from localhub.cli.console import console
from localhub.cli.context import get_cli_context
from localhub.cli.output import (
    OutputFormat,
    format_count,
    format_datetime,
    format_info,
    format_json,
    format_size,
    format_success,
    format_warning,
)
from localhub.hub import HubManager, RepoSummary


def _hub(ctx: click.Context, hub_path: Path | None) -> HubManager:
    return HubManager(get_cli_context(ctx).hub_root(hub_path))


def _build_detail_table(repos: list[RepoSummary], title: str) -> Table:
    table = Table(title=title, show_lines=False)
    table.add_column("Name", no_wrap=True)
    table.add_column("Size", justify="right")
    table.add_column("Commits", justify="right", style="yellow")
    table.add_column("Modified", justify="right", style="dim")
    for repo in repos:
        table.add_row(
            escape(repo.name),
            format_size(repo.size),
            format_count(repo.commits),
            format_datetime(repo.modified),
        )
    return table


def _echo_repo_names(repos: list[RepoSummary]) -> None:
    for repo in repos:
        click.echo(f"  {repo.name}")


def _confirm_delete(summary: RepoSummary) -> bool:
    """Show what is about to be deleted and ask the user."""
    click.echo(format_warning(f"You are about to delete repository '{summary.name}'"))
    click.echo(f"  Path:    {summary.path}")
    click.echo(f"  Size:    {format_size(summary.size)}")
    click.echo(f"  Commits: {format_count(summary.commits)}")
    return click.confirm(
        "Are you sure you want to delete this repository?",
        default=False,
    )


@click.command("init")
@hub_path_option
@click.pass_context
def init(ctx: click.Context, hub_path: Path | None) -> None:
    """Initialize the hub directory.

    Safe to run repeatedly; an existing hub is left as is.

    Examples:
        localhub init
        localhub init --hub-path /srv/git-backups
    """
    with cli_error_handler():
        root = _hub(ctx, hub_path).init()
        click.echo(format_success(f"Local Git Hub initialized at: {root}"))


@click.command("create")
@click.argument("name")
@hub_path_option
@click.pass_context
def create(ctx: click.Context, name: str, hub_path: Path | None) -> None:
    """Create a new bare repository NAME in the hub.

    Examples:
        localhub create my-project
    """
    with cli_error_handler():
        repo = _hub(ctx, hub_path).create(name)
        click.echo(format_success(f"Repository '{name}' created at: {repo.path}"))
        click.echo(
            format_info(
                f"Use '{PROG_NAME} add-remote {name}' to add it to the current project"
            )
        )


@click.command("list")
@click.option(
    "-d",
    "--detailed",
    is_flag=True,
    default=False,
    help="Show size, commit count and modification time.",
)
@format_option
@hub_path_option
@click.pass_context
def list_repos(
    ctx: click.Context,
    detailed: bool,
    fmt: str,
    hub_path: Path | None,
) -> None:
    """List all repositories in the hub.

    Examples:
        localhub list
        localhub list --detailed
        localhub list --format json
    """
    with cli_error_handler():
        repos = _hub(ctx, hub_path).list_repos(detailed=detailed)

        if fmt == OutputFormat.JSON.value:
            click.echo(format_json([repo.to_dict() for repo in repos]))
            return

        if not repos:
            click.echo(format_warning("No repositories in hub"))
            click.echo(
                format_info(f"Use '{PROG_NAME} create <name>' to create a new repository")
            )
            return

        if detailed:
            console.print(_build_detail_table(repos, "Repositories in Hub"))
        else:
            click.echo("Repositories in Hub:")
            _echo_repo_names(repos)
        click.echo(f"\nTotal: {len(repos)} repositories")


@click.command("search")
@click.argument("pattern")
@format_option
@hub_path_option
@click.pass_context
def search(
    ctx: click.Context,
    pattern: str,
    fmt: str,
    hub_path: Path | None,
) -> None:
    """Search repositories whose name contains PATTERN (case-insensitive).

    Examples:
        localhub search my
    """
    with cli_error_handler():
        repos = _hub(ctx, hub_path).search(pattern)

        if fmt == OutputFormat.JSON.value:
            click.echo(format_json([repo.to_dict() for repo in repos]))
            return

        click.echo(f"Search Results for '{pattern}':")
        if not repos:
            click.echo(format_warning("No repositories found"))
            return
        _echo_repo_names(repos)
        click.echo(f"\nFound: {len(repos)} repositories")


@click.command("info")
@click.argument("name")
@format_option
@hub_path_option
@click.pass_context
def info(ctx: click.Context, name: str, fmt: str, hub_path: Path | None) -> None:
    """Show details of repository NAME.

    Examples:
        localhub info my-project
    """
    with cli_error_handler():
        repo = _hub(ctx, hub_path).info(name)

        if fmt == OutputFormat.JSON.value:
            click.echo(format_json(repo.to_dict()))
            return

        click.echo(f"Repository: {repo.name}")
        click.echo(f"  Path:     {repo.path}")
        click.echo(f"  Size:     {format_size(repo.size)}")
        click.echo(f"  Commits:  {format_count(repo.commits)}")
        click.echo(f"  Modified: {format_datetime(repo.modified)}")


@click.command("delete")
@click.argument("name")
@click.option(
    "-f",
    "--force",
    is_flag=True,
    default=False,
    help="Skip confirmation prompt.",
)
@hub_path_option
@click.pass_context
def delete(ctx: click.Context, name: str, force: bool, hub_path: Path | None) -> None:
    """Delete repository NAME from the hub.

    Asks for confirmation unless --force is given.

    Examples:
        localhub delete old-project
        localhub delete old-project --force
    """
    with cli_error_handler():
        deleted = _hub(ctx, hub_path).delete(name, force=force, confirm=_confirm_delete)
        if not deleted:
            click.echo(format_info("Deletion cancelled"))
            return
        click.echo(format_success(f"Repository '{name}' deleted"))
