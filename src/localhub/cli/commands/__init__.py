"""Click commands for localhub."""

from __future__ import annotations

from localhub.cli.commands.hub import create, delete, info, init, list_repos, search
from localhub.cli.commands.remote import (
    add_push_url,
    add_remote,
    list_remotes,
    remove_remote,
)

__all__ = [
    "add_push_url",
    "add_remote",
    "create",
    "delete",
    "info",
    "init",
    "list_remotes",
    "list_repos",
    "remove_remote",
    "search",
]
