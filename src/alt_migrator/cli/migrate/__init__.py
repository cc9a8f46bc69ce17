"""Migrate feature - copy alt-text from an outbox export onto drive files."""

from .commands import migrate

__all__ = ["migrate"]
