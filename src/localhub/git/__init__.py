"""Git operations package using GitPython.

Usage:
    ```python
    from localhub.git import GitRepository

    repo = GitRepository("/path/to/repo")
    repo.remote_names()
    ```
"""

from __future__ import annotations

from localhub.git.repository import (
    GitRepository,
    directory_size,
    is_bare_repository,
)

__all__ = [
    "GitRepository",
    "directory_size",
    "is_bare_repository",
]
