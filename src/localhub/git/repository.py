"""GitPython-based repository operations for localhub.

This module is the single seam between localhub and git. Everything the hub
and remote managers need from git goes through here:

- Open a repository (failing cleanly when the path is not a repository)
- Initialize a bare repository
- Count commits reachable from HEAD
- Enumerate, create and remove remotes
- Read and append ``pushurl`` entries of a remote

Example:
    ```python
    from localhub.git import GitRepository

    bare = GitRepository.init_bare("/home/me/.local-git-hub/proj.git")
    bare.commit_count()  # None until something is pushed

    work = GitRepository("/home/me/src/proj")
    work.create_remote("local-hub", str(bare.path))
    work.add_push_url("origin", str(bare.path))
    ```
"""

from __future__ import annotations

import os
from pathlib import Path

from git import GitCommandError, InvalidGitRepositoryError, NoSuchPathError, Repo
from git.exc import GitCommandNotFound

from localhub.exceptions import GitError, GitNotFoundError, NotARepositoryError
from localhub.logging import get_logger

logger = get_logger(__name__)

__all__ = [
    "GitRepository",
    "directory_size",
    "is_bare_repository",
]

# =============================================================================
# Constants
# =============================================================================

#: Entries every bare repository carries at its top level
BARE_REPO_MARKERS: tuple[str, ...] = ("HEAD", "objects", "refs")


# =============================================================================
# Helper Functions
# =============================================================================


def _remote_section(name: str) -> str:
    return f'remote "{name}"'


def _convert_git_error(exc: GitCommandError, operation: str) -> GitError:
    """Convert GitPython exception to localhub exception.

    Args:
        exc: GitPython exception.
        operation: Name of the git operation that failed.

    Returns:
        GitError carrying git's stderr.
    """
    stderr = str(exc.stderr or exc.stdout or "").strip()
    detail = stderr or str(exc)
    return GitError(f"git {operation} failed: {detail}", operation=operation)


def is_bare_repository(path: Path) -> bool:
    """Check whether a directory looks like a bare git repository.

    Only the on-disk layout is inspected (``HEAD``, ``objects/``, ``refs/``),
    so a damaged repository is still reported as invalid without git being
    invoked.
    """
    return path.is_dir() and all((path / marker).exists() for marker in BARE_REPO_MARKERS)


def _raise_walk_error(error: OSError) -> None:
    raise error


def directory_size(path: Path) -> int:
    """Recursively sum the byte size of all regular files under ``path``.

    Symbolic links are not followed.

    Raises:
        OSError: If ``path`` or any directory below it cannot be read.
    """
    total = 0
    for root, _dirs, files in os.walk(path, onerror=_raise_walk_error):
        for filename in files:
            file_path = Path(root) / filename
            if file_path.is_symlink():
                continue
            total += file_path.stat().st_size
    return total


# =============================================================================
# Main Class: GitRepository
# =============================================================================


class GitRepository:
    """GitPython-based repository operations.

    Example:
        ```python
        repo = GitRepository("/path/to/repo")
        repo.remote_names()
        repo.create_remote("local-hub", "/home/me/.local-git-hub/proj.git")
        ```
    """

    def __init__(self, path: Path | str | None = None) -> None:
        """Initialize GitRepository.

        Args:
            path: Path to the git repository. Defaults to current directory.

        Raises:
            GitNotFoundError: If git is not installed.
            NotARepositoryError: If path is not a git repository.
        """
        resolved_path = Path.cwd() if path is None else Path(path)

        self._path = resolved_path

        try:
            self._repo = Repo(resolved_path)
        except GitCommandNotFound as e:
            raise GitNotFoundError("Git CLI not found. Please install git.") from e
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise NotARepositoryError(
                f"Not a git repository: {resolved_path}",
                path=resolved_path,
            ) from e

    @classmethod
    def init_bare(cls, path: Path | str) -> GitRepository:
        """Initialize a bare repository at ``path``.

        Missing parent directories are created.

        Raises:
            GitNotFoundError: If git is not installed.
            GitError: If git refuses to initialize the repository.
        """
        target = Path(path)
        try:
            Repo.init(target, bare=True, mkdir=True)
        except GitCommandNotFound as e:
            raise GitNotFoundError("Git CLI not found. Please install git.") from e
        except GitCommandError as e:
            raise _convert_git_error(e, "init_bare") from e

        logger.debug("bare_repository_initialized", path=str(target))
        return cls(target)

    @property
    def path(self) -> Path:
        """Path the repository was opened from."""
        return self._path

    @property
    def repo(self) -> Repo:
        """Underlying GitPython Repo instance."""
        return self._repo

    # -------------------------------------------------------------------------
    # History
    # -------------------------------------------------------------------------

    def commit_count(self) -> int | None:
        """Count commits reachable from HEAD.

        Returns:
            Number of commits, or None when HEAD does not point at a commit
            (fresh bare repositories) or the history cannot be read.
        """
        if not self._repo.head.is_valid():
            return None
        try:
            return sum(1 for _ in self._repo.iter_commits("HEAD"))
        except (GitCommandError, ValueError) as e:
            logger.debug("commit_count_unavailable", path=str(self._path), error=str(e))
            return None

    # -------------------------------------------------------------------------
    # Remotes
    # -------------------------------------------------------------------------

    def remote_names(self) -> list[str]:
        """Names of all configured remotes, in configuration order."""
        return [remote.name for remote in self._repo.remotes]

    def has_remote(self, name: str) -> bool:
        return name in self.remote_names()

    def remote_url(self, name: str) -> str | None:
        """Get the fetch URL of a remote.

        Returns:
            The ``url`` value, or None if the remote has no URL.
        """
        reader = self._repo.config_reader()
        section = _remote_section(name)
        if not reader.has_option(section, "url"):
            return None
        return str(reader.get_value(section, "url"))

    def remote_push_urls(self, name: str) -> list[str]:
        """Get every ``pushurl`` configured on a remote, in file order."""
        reader = self._repo.config_reader()
        section = _remote_section(name)
        if not reader.has_option(section, "pushurl"):
            return []
        return [str(value) for value in reader.get_values(section, "pushurl")]

    def create_remote(self, name: str, url: str) -> None:
        """Create a remote with the standard fetch refspec.

        Raises:
            GitError: If git fails to add the remote.
        """
        try:
            self._repo.create_remote(name, url)
        except GitCommandError as e:
            raise _convert_git_error(e, "remote_add") from e
        logger.debug("remote_created", path=str(self._path), remote=name, url=url)

    def add_push_url(self, name: str, url: str) -> None:
        """Append a ``pushurl`` entry to a remote, keeping existing entries.

        Raises:
            GitError: If the repository configuration cannot be written.
        """
        try:
            with self._repo.config_writer() as writer:
                writer.add_value(_remote_section(name), "pushurl", url)
        except OSError as e:
            raise GitError(
                f"Failed to write git config: {e}", operation="remote_set_pushurl"
            ) from e
        logger.debug("push_url_appended", path=str(self._path), remote=name, url=url)

    def delete_remote(self, name: str) -> None:
        """Remove a remote and its remote-tracking branches.

        Raises:
            GitError: If git fails to remove the remote.
        """
        try:
            self._repo.delete_remote(self._repo.remote(name))
        except GitCommandError as e:
            raise _convert_git_error(e, "remote_remove") from e
        logger.debug("remote_deleted", path=str(self._path), remote=name)
