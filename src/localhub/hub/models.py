"""Typed models for hub listings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from localhub.utils.paths import strip_repo_suffix


@dataclass(frozen=True, slots=True)
class RepoSummary:
    """Snapshot of a hub member.

    Plain listings fill only ``name`` and ``path``; detailed listings also
    carry size, commit count and modification time.

    Attributes:
        name: Directory name, bare suffix included (e.g. ``proj.git``).
        path: Absolute path to the bare repository.
        size: Recursive byte count of the repository directory.
        commits: Commits reachable from HEAD, or None for an empty history.
        modified: Last modification time of the repository directory.
    """

    name: str
    path: Path
    size: int | None = None
    commits: int | None = None
    modified: datetime | None = None

    @property
    def display_name(self) -> str:
        """Name with the bare suffix stripped."""
        return strip_repo_suffix(self.name)

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "path": str(self.path),
            "size": self.size,
            "commits": self.commits,
            "modified": self.modified.isoformat() if self.modified else None,
        }
