"""localhub - manage a local hub of bare git repositories used as backups."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
