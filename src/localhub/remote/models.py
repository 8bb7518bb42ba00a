"""Typed models for remote listings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RemoteSummary:
    """A remote as stored in a repository's git config.

    Attributes:
        name: Remote name.
        url: Fetch URL, or None if the remote has no ``url`` entry.
        push_urls: Every ``pushurl`` entry, in configuration order.
    """

    name: str
    url: str | None = None
    push_urls: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "url": self.url,
            "push_urls": list(self.push_urls),
        }
