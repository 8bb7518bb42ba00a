"""CLI context and exit codes for localhub."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

import click

from localhub.config import LocalHubConfig, load_config
from localhub.utils.paths import resolve_hub_root, resolve_target_path

__all__ = [
    "ExitCode",
    "CLIContext",
    "get_cli_context",
]


class ExitCode(IntEnum):
    """Standard exit codes for localhub CLI.

    - 0 for success
    - 1 for any reported error
    - 130 for keyboard interrupt (128 + SIGINT=2)
    """

    SUCCESS = 0
    FAILURE = 1
    INTERRUPTED = 130


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Type-safe CLI context carrying the loaded configuration.

    Attributes:
        config: Loaded localhub configuration.
    """

    config: LocalHubConfig

    def hub_root(self, override: Path | None = None) -> Path:
        """Resolve the hub root: ``--hub-path`` > config ``hub_path`` > default.

        Raises:
            PathResolutionError: If no path is configured and the home
                directory cannot be determined.
        """
        return resolve_hub_root(override if override is not None else self.config.hub_path)

    def target_path(self, override: Path | None = None) -> Path:
        return resolve_target_path(override)


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Fetch the CLIContext stored by the root command group.

    Falls back to a default configuration when a command is invoked without
    the group (as some tests do).
    """
    obj = ctx.find_root().obj
    if isinstance(obj, dict) and isinstance(obj.get("cli_ctx"), CLIContext):
        return obj["cli_ctx"]
    return CLIContext(config=load_config())
