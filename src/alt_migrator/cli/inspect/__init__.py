"""Inspect feature - read-only listing commands."""

from .commands import list_attachments, list_folders

__all__ = ["list_attachments", "list_folders"]
