from __future__ import annotations

from pathlib import Path

from localhub.exceptions.base import LocalHubError


class GitError(LocalHubError):
    """Exception for git operation failures.

    Raised when GitPython or the git binary fails while initializing a bare
    repository or editing a repository's remote configuration.

    Attributes:
        message: Human-readable error message.
        operation: Git operation that failed (e.g., "init_bare", "remote_add").
    """

    def __init__(self, message: str, operation: str | None = None) -> None:
        """Initialize the GitError.

        Args:
            message: Human-readable error message.
            operation: Git operation that failed.
        """
        self.operation = operation
        super().__init__(message)


class GitNotFoundError(GitError):
    """Exception raised when git CLI is not installed or not in PATH."""

    def __init__(self, message: str = "Git CLI not found") -> None:
        super().__init__(message, operation="git_check")


class RemoteError(GitError):
    """Base exception for remote configuration operations.

    Attributes:
        message: Human-readable error message.
        remote_name: Name of the remote involved, when known.
    """

    def __init__(
        self,
        message: str,
        *,
        remote_name: str | None = None,
        operation: str | None = None,
    ) -> None:
        self.remote_name = remote_name
        super().__init__(message, operation=operation)


class NotARepositoryError(RemoteError):
    """Exception raised when the target path is not a git repository.

    Attributes:
        message: Human-readable error message.
        path: Directory that is not a repo.
    """

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.path = path
        super().__init__(message, operation="repo_check")


class RemoteExistsError(RemoteError):
    """Exception raised when adding a remote whose name is already taken."""

    def __init__(self, remote_name: str) -> None:
        super().__init__(
            f"Remote '{remote_name}' already exists",
            remote_name=remote_name,
            operation="remote_add",
        )


class RemoteNotFoundError(RemoteError):
    """Exception raised when the named remote is not configured."""

    def __init__(self, remote_name: str) -> None:
        super().__init__(
            f"Remote '{remote_name}' does not exist",
            remote_name=remote_name,
            operation="remote_lookup",
        )


class PushUrlExistsError(RemoteError):
    """Exception raised when a push URL is already configured on the remote.

    Attributes:
        url: The duplicate push URL.
    """

    def __init__(self, remote_name: str, url: str) -> None:
        self.url = url
        super().__init__(
            f"Push URL '{url}' already exists for remote '{remote_name}'",
            remote_name=remote_name,
            operation="remote_set_pushurl",
        )
