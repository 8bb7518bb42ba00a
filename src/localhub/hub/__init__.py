"""Hub package.

Provides :class:`HubManager` for creating, listing, searching, inspecting and
deleting bare repositories under the hub root (``~/.local-git-hub`` by
default).
"""

from __future__ import annotations

from localhub.hub.manager import ConfirmCallback, HubManager
from localhub.hub.models import RepoSummary

__all__ = [
    "ConfirmCallback",
    "HubManager",
    "RepoSummary",
]
