from __future__ import annotations

from localhub.exceptions.base import LocalHubError


class PathResolutionError(LocalHubError):
    """Exception raised when the hub or target path cannot be resolved.

    Typically raised when no ``--hub-path`` override was supplied and the
    user's home directory cannot be determined.
    """
