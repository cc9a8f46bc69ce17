"""CLI package - feature-based commands over stateless services.

- core/: Shared utilities (result type, validators, console)
- migrate/: The alt-text migration command
- inspect/: Read-only listing of outbox attachments and drive folders

Usage:
    alt-migrator --help
    alt-migrator migrate --instance example.social --outbox ./outbox.json
    alt-migrator list-folders
"""

from .app import app, main

__all__ = ["app", "main"]
