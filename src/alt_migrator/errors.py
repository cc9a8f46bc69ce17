"""Exception hierarchy shared across the migrator."""

from __future__ import annotations


class MigratorError(Exception):
    """Base exception for all migrator failures surfaced to the user."""
