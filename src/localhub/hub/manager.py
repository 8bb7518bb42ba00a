"""Hub lifecycle manager.

Creates, lists, searches, inspects and deletes bare repositories living
directly under the hub root. Hub membership is never stored: it is derived
by listing the hub directory at query time.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable, Iterator
from datetime import datetime
from pathlib import Path

from localhub.exceptions import (
    HubIOError,
    InvalidRepositoryError,
    NotARepositoryError,
    RepositoryExistsError,
    RepositoryNotFoundError,
)
from localhub.git import GitRepository, directory_size, is_bare_repository
from localhub.hub.models import RepoSummary
from localhub.logging import get_logger
from localhub.utils.paths import BARE_REPO_SUFFIX, resolve_repo_path
from localhub.utils.validation import validate_repo_name

logger = get_logger(__name__)

#: Receives the summary of the repository about to be deleted and returns
#: True to proceed.
ConfirmCallback = Callable[[RepoSummary], bool]


class HubManager:
    """Manage the bare repositories of a hub directory.

    Args:
        hub_root: Absolute path to the hub root directory.

    Example:
        ```python
        hub = HubManager(resolve_hub_root())
        hub.init()
        hub.create("proj")
        [repo.name for repo in hub.list_repos()]  # ['proj.git']
        ```
    """

    def __init__(self, hub_root: Path) -> None:
        self._hub_root = hub_root

    @property
    def hub_root(self) -> Path:
        return self._hub_root

    # =====================================================================
    # Hub directory
    # =====================================================================

    def init(self) -> Path:
        """Create the hub directory tree if absent.

        Idempotent: an existing hub is left untouched.

        Returns:
            The hub root.

        Raises:
            HubIOError: If the directory cannot be created.
        """
        try:
            self._hub_root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise HubIOError(
                f"Failed to create hub directory {self._hub_root}: {e}",
                path=self._hub_root,
            ) from e
        logger.info("hub_initialized", path=str(self._hub_root))
        return self._hub_root

    def _iter_member_paths(self) -> Iterator[Path]:
        if not self._hub_root.is_dir():
            return
        try:
            entries = sorted(self._hub_root.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise HubIOError(
                f"Failed to read hub directory {self._hub_root}: {e}",
                path=self._hub_root,
            ) from e
        for entry in entries:
            if entry.is_dir() and entry.name.endswith(BARE_REPO_SUFFIX):
                yield entry

    # =====================================================================
    # Member lookup
    # =====================================================================

    def repo_path(self, name: str) -> Path:
        """Absolute path of an existing hub member.

        Raises:
            NameValidationError: If the name is invalid.
            RepositoryNotFoundError: If the member does not exist.
        """
        validate_repo_name(name)
        path = resolve_repo_path(self._hub_root, name)
        if not path.exists():
            raise RepositoryNotFoundError(
                f"Repository '{name}' does not exist in hub",
                repo_name=name,
            )
        return path

    def exists(self, name: str) -> bool:
        """Whether a member with this name is present in the hub.

        Raises:
            NameValidationError: If the name is invalid.
        """
        validate_repo_name(name)
        return resolve_repo_path(self._hub_root, name).exists()

    def _summarize(self, path: Path, detailed: bool) -> RepoSummary:
        if not detailed:
            return RepoSummary(name=path.name, path=path)

        try:
            size = directory_size(path)
            modified = datetime.fromtimestamp(path.stat().st_mtime)
        except OSError as e:
            raise HubIOError(f"Failed to read {path}: {e}", path=path) from e

        try:
            commits = GitRepository(path).commit_count()
        except NotARepositoryError:
            commits = None

        return RepoSummary(
            name=path.name,
            path=path,
            size=size,
            commits=commits,
            modified=modified,
        )

    # =====================================================================
    # Operations
    # =====================================================================

    def create(self, name: str) -> RepoSummary:
        """Create a new bare repository in the hub.

        The hub directory is created first if needed.

        Args:
            name: Repository name, with or without the ``.git`` suffix.

        Returns:
            Summary of the new member.

        Raises:
            NameValidationError: If the name is invalid.
            RepositoryExistsError: If the member already exists. The existing
                member is left unchanged.
            GitError: If git fails to initialize the repository.
        """
        if self.exists(name):
            raise RepositoryExistsError(
                f"Repository '{name}' already exists",
                repo_name=name,
            )

        self.init()
        path = resolve_repo_path(self._hub_root, name)
        GitRepository.init_bare(path)
        logger.info("repository_created", name=name, path=str(path))
        return RepoSummary(name=path.name, path=path)

    def list_repos(self, detailed: bool = False) -> list[RepoSummary]:
        """List hub members, sorted by name.

        Args:
            detailed: Also compute size, commit count and modification time.
                Members whose details cannot be read are skipped.

        Returns:
            Summaries of all members; empty when the hub does not exist.
        """
        repos: list[RepoSummary] = []
        for path in self._iter_member_paths():
            try:
                repos.append(self._summarize(path, detailed))
            except HubIOError as e:
                logger.warning("repository_unreadable", path=str(path), error=e.message)
        return repos

    def search(self, pattern: str, detailed: bool = False) -> list[RepoSummary]:
        """Find members whose name contains ``pattern``, ignoring case.

        Matching is done against the name with the ``.git`` suffix stripped.

        Example:
            >>> [r.name for r in hub.search("MY")]
            ['my-other.git', 'my-project.git']
        """
        needle = pattern.lower()
        return [
            repo
            for repo in self.list_repos(detailed=detailed)
            if needle in repo.display_name.lower()
        ]

    def info(self, name: str) -> RepoSummary:
        """Detailed summary of one member.

        Raises:
            NameValidationError: If the name is invalid.
            RepositoryNotFoundError: If the member does not exist.
        """
        path = self.repo_path(name)
        return self._summarize(path, detailed=True)

    def delete(
        self,
        name: str,
        force: bool = False,
        confirm: ConfirmCallback | None = None,
    ) -> bool:
        """Delete a member after confirmation.

        Args:
            name: Repository name.
            force: Skip confirmation.
            confirm: Called with the member summary before removal when
                ``force`` is False; removal only happens if it returns True.
                Without a callback nothing is removed unless ``force`` is set.

        Returns:
            True if the repository was removed, False if deletion was declined.

        Raises:
            NameValidationError: If the name is invalid.
            RepositoryNotFoundError: If the member does not exist.
            InvalidRepositoryError: If the path is not a bare repository.
            HubIOError: If the directory cannot be removed.
        """
        path = self.repo_path(name)

        if not is_bare_repository(path):
            raise InvalidRepositoryError(
                f"Path '{path}' is not a valid Git repository",
                repo_name=name,
                path=path,
            )

        if not force:
            summary = self._summarize(path, detailed=True)
            if confirm is None or not confirm(summary):
                logger.info("repository_delete_declined", name=name)
                return False

        try:
            shutil.rmtree(path)
        except OSError as e:
            raise HubIOError(f"Failed to delete repository {path}: {e}", path=path) from e

        logger.info("repository_deleted", name=name, path=str(path), forced=force)
        return True
