"""Data models for archived outbox content."""

from __future__ import annotations

from dataclasses import dataclass


def filename_from_url(url: str) -> str:
    """Return everything after the last ``/`` of ``url``."""
    return url[url.rfind("/") + 1:]


@dataclass(frozen=True)
class Attachment:
    """A media attachment from the archive: file name plus alt-text."""

    filename: str
    alt_text: str | None = None

    @classmethod
    def from_descriptor(cls, descriptor: dict) -> "Attachment":
        """Build from an ActivityPub attachment descriptor ``{url, name}``."""
        return cls(
            filename=filename_from_url(descriptor["url"]),
            alt_text=descriptor.get("name"),
        )

    @property
    def has_alt_text(self) -> bool:
        return bool(self.alt_text)
