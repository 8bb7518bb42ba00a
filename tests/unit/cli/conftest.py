"""Shared fixtures for CLI command tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner, Result

from localhub.main import cli


@pytest.fixture
def run_cli(
    cli_runner: CliRunner, hub_root: Path, clean_env: None
) -> Callable[..., Result]:
    """Invoke the CLI with ``--hub-path`` appended for hub-aware commands.

    Example:
        >>> result = run_cli("create", "proj")
    """
    hub_commands = {"init", "create", "list", "search", "info", "delete",
                    "add-remote", "add-push-url"}

    def _run(*args: str, input: str | None = None) -> Result:
        argv = list(args)
        if argv and argv[0] in hub_commands:
            argv += ["--hub-path", str(hub_root)]
        return cli_runner.invoke(cli, argv, input=input)

    return _run
