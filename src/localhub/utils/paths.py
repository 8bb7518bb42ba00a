"""Path resolution for the hub and its member repositories.

Every function here is a pure function of its inputs and the process
environment (home directory, current working directory); nothing touches the
filesystem.
"""

from __future__ import annotations

from pathlib import Path

from localhub.exceptions import PathResolutionError

__all__ = [
    "BARE_REPO_SUFFIX",
    "DEFAULT_HUB_DIRNAME",
    "repo_dirname",
    "resolve_hub_root",
    "resolve_repo_path",
    "resolve_target_path",
    "strip_repo_suffix",
]

#: Directory under the user's home used when no hub path is configured
DEFAULT_HUB_DIRNAME = ".local-git-hub"

#: Suffix identifying hub members on disk
BARE_REPO_SUFFIX = ".git"


def _absolute(path: Path | str) -> Path:
    return Path(path).expanduser().resolve()


def resolve_hub_root(override: Path | str | None = None) -> Path:
    """Resolve the absolute hub root directory.

    Args:
        override: Explicit hub root (from ``--hub-path`` or configuration).

    Returns:
        ``override`` made absolute, or ``~/.local-git-hub``.

    Raises:
        PathResolutionError: If no override is given and the home directory
            cannot be determined.

    Example:
        >>> resolve_hub_root("/srv/backups")
        PosixPath('/srv/backups')
    """
    if override is not None:
        return _absolute(override)

    try:
        home = Path.home()
    except (KeyError, RuntimeError) as e:
        raise PathResolutionError(
            "Cannot determine home directory; pass --hub-path explicitly"
        ) from e

    return _absolute(home / DEFAULT_HUB_DIRNAME)


def repo_dirname(name: str) -> str:
    """Return the on-disk directory name for a repository name.

    Names already carrying the bare suffix are used unchanged, so ``proj``
    and ``proj.git`` address the same member.

    Example:
        >>> repo_dirname("proj")
        'proj.git'
        >>> repo_dirname("proj.git")
        'proj.git'
    """
    if name.endswith(BARE_REPO_SUFFIX) and len(name) > len(BARE_REPO_SUFFIX):
        return name
    return f"{name}{BARE_REPO_SUFFIX}"


def strip_repo_suffix(dirname: str) -> str:
    """Strip the bare suffix from a member directory name.

    Example:
        >>> strip_repo_suffix("my-project.git")
        'my-project'
    """
    if dirname.endswith(BARE_REPO_SUFFIX):
        return dirname[: -len(BARE_REPO_SUFFIX)]
    return dirname


def resolve_repo_path(hub_root: Path, name: str) -> Path:
    """Resolve the absolute path of a hub member.

    Args:
        hub_root: Absolute hub root (see :func:`resolve_hub_root`).
        name: Repository name, with or without the bare suffix.

    Returns:
        ``hub_root / <name>.git``.
    """
    return hub_root / repo_dirname(name)


def resolve_target_path(override: Path | str | None = None) -> Path:
    """Resolve the working repository whose remotes are edited.

    Args:
        override: Explicit path (from ``--path``). Defaults to the current
            working directory.

    Returns:
        Absolute target path.
    """
    if override is not None:
        return _absolute(override)
    return Path.cwd().resolve()
