"""Remote configuration package.

Provides :class:`RemoteManager` for pointing a working repository's remotes
at hub members.
"""

from __future__ import annotations

from localhub.remote.manager import (
    DEFAULT_HUB_REMOTE_NAME,
    DEFAULT_PUSH_REMOTE_NAME,
    RemoteManager,
)
from localhub.remote.models import RemoteSummary

__all__ = [
    "DEFAULT_HUB_REMOTE_NAME",
    "DEFAULT_PUSH_REMOTE_NAME",
    "RemoteManager",
    "RemoteSummary",
]
