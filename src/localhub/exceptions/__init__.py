"""localhub exception hierarchy.

All exceptions can be imported from this package:
    from localhub.exceptions import LocalHubError, RepositoryNotFoundError
"""

from __future__ import annotations

# Base exception
from localhub.exceptions.base import LocalHubError

# Configuration exceptions
from localhub.exceptions.config import ConfigError

# Git and remote exceptions
from localhub.exceptions.git import (
    GitError,
    GitNotFoundError,
    NotARepositoryError,
    PushUrlExistsError,
    RemoteError,
    RemoteExistsError,
    RemoteNotFoundError,
)

# Hub exceptions
from localhub.exceptions.hub import (
    HubError,
    HubIOError,
    InvalidRepositoryError,
    RepositoryExistsError,
    RepositoryNotFoundError,
)

# Path resolution exceptions
from localhub.exceptions.paths import PathResolutionError

# Repository name validation exceptions
from localhub.exceptions.validation import (
    EmptyNameError,
    InvalidCharacterError,
    NameTooLongError,
    NameValidationError,
    ReservedNameError,
)

__all__ = [
    # Base
    "LocalHubError",
    # Config
    "ConfigError",
    # Git / remotes
    "GitError",
    "GitNotFoundError",
    "NotARepositoryError",
    "PushUrlExistsError",
    "RemoteError",
    "RemoteExistsError",
    "RemoteNotFoundError",
    # Hub
    "HubError",
    "HubIOError",
    "InvalidRepositoryError",
    "RepositoryExistsError",
    "RepositoryNotFoundError",
    # Paths
    "PathResolutionError",
    # Validation
    "EmptyNameError",
    "InvalidCharacterError",
    "NameTooLongError",
    "NameValidationError",
    "ReservedNameError",
]
