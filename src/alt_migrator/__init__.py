"""Migrate alt-text from an exported outbox archive into a remote drive."""

__version__ = "0.1.0"
