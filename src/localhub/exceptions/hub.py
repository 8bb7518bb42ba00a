"""Hub exception hierarchy.

Errors raised while managing bare repositories under the hub root.
"""

from __future__ import annotations

from pathlib import Path

from localhub.exceptions.base import LocalHubError

__all__ = [
    "HubIOError",
    "HubError",
    "RepositoryExistsError",
    "RepositoryNotFoundError",
    "InvalidRepositoryError",
]


class HubIOError(LocalHubError):
    """A filesystem operation on the hub failed.

    Attributes:
        message: Human-readable error message.
        path: Path that could not be read or written.
    """

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.path = path
        super().__init__(message)


class HubError(LocalHubError):
    """Base exception for hub member operations.

    Attributes:
        message: Human-readable error message.
        repo_name: Repository name as given by the user.
    """

    def __init__(self, message: str, *, repo_name: str | None = None) -> None:
        self.repo_name = repo_name
        super().__init__(message)


class RepositoryExistsError(HubError):
    """A hub member with this name already exists."""


class RepositoryNotFoundError(HubError):
    """No hub member with this name exists."""


class InvalidRepositoryError(HubError):
    """The member path exists but is not a valid bare repository.

    Attributes:
        path: The offending member path.
    """

    def __init__(
        self,
        message: str,
        *,
        repo_name: str | None = None,
        path: Path | None = None,
    ) -> None:
        self.path = path
        super().__init__(message, repo_name=repo_name)
