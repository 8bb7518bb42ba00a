"""Remote configuration manager.

Edits the ``[remote "<name>"]`` sections of a working repository so that
fetches and pushes reach bare repositories in the hub.
"""

from __future__ import annotations

from pathlib import Path

from localhub.exceptions import (
    PushUrlExistsError,
    RemoteExistsError,
    RemoteNotFoundError,
)
from localhub.git import GitRepository
from localhub.logging import get_logger
from localhub.remote.models import RemoteSummary

logger = get_logger(__name__)

#: Remote created by ``add-remote`` when no name is given
DEFAULT_HUB_REMOTE_NAME = "local-hub"

#: Remote extended by ``add-push-url`` when no name is given
DEFAULT_PUSH_REMOTE_NAME = "origin"


class RemoteManager:
    """Manage the remotes of one working repository.

    Args:
        target_path: Absolute path to the working repository.

    Raises:
        NotARepositoryError: If ``target_path`` is not a git repository.

    Example:
        ```python
        remotes = RemoteManager(resolve_target_path())
        remotes.add_remote(hub.repo_path("proj"))
        remotes.add_push_url(hub.repo_path("proj"), remote_name="origin")
        ```
    """

    def __init__(self, target_path: Path) -> None:
        self._target_path = target_path
        self._git = GitRepository(target_path)

    @property
    def target_path(self) -> Path:
        return self._target_path

    def add_remote(
        self,
        hub_member_path: Path,
        remote_name: str = DEFAULT_HUB_REMOTE_NAME,
    ) -> RemoteSummary:
        """Add a remote whose fetch URL is the hub member path.

        Raises:
            RemoteExistsError: If ``remote_name`` is already configured. The
                existing remote is left unchanged.
        """
        if self._git.has_remote(remote_name):
            raise RemoteExistsError(remote_name)

        url = str(hub_member_path)
        self._git.create_remote(remote_name, url)
        logger.info(
            "remote_added",
            target=str(self._target_path),
            remote=remote_name,
            url=url,
        )
        return self._summary(remote_name)

    def add_push_url(
        self,
        hub_member_path: Path,
        remote_name: str = DEFAULT_PUSH_REMOTE_NAME,
    ) -> RemoteSummary:
        """Add the hub member as an extra push destination of a remote.

        Git stops pushing to ``url`` once any ``pushurl`` exists, so the
        first call also records the current fetch URL as a push URL. The
        ``url`` entry itself is never modified.

        Raises:
            RemoteNotFoundError: If ``remote_name`` is not configured.
            PushUrlExistsError: If the hub member is already a push URL.
        """
        if not self._git.has_remote(remote_name):
            raise RemoteNotFoundError(remote_name)

        url = str(hub_member_path)
        push_urls = self._git.remote_push_urls(remote_name)
        if url in push_urls:
            raise PushUrlExistsError(remote_name, url)

        primary_url = self._git.remote_url(remote_name)
        if not push_urls and primary_url and primary_url != url:
            self._git.add_push_url(remote_name, primary_url)

        self._git.add_push_url(remote_name, url)
        logger.info(
            "push_url_added",
            target=str(self._target_path),
            remote=remote_name,
            url=url,
        )
        return self._summary(remote_name)

    def list_remotes(self) -> list[RemoteSummary]:
        """Summaries of every configured remote, in configuration order."""
        return [self._summary(name) for name in self._git.remote_names()]

    def remove_remote(self, remote_name: str) -> None:
        """Remove a remote.

        Raises:
            RemoteNotFoundError: If ``remote_name`` is not configured.
        """
        if not self._git.has_remote(remote_name):
            raise RemoteNotFoundError(remote_name)

        self._git.delete_remote(remote_name)
        logger.info(
            "remote_removed",
            target=str(self._target_path),
            remote=remote_name,
        )

    def _summary(self, remote_name: str) -> RemoteSummary:
        return RemoteSummary(
            name=remote_name,
            url=self._git.remote_url(remote_name),
            push_urls=tuple(self._git.remote_push_urls(remote_name)),
        )
