"""Typer app configuration and logging setup."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

# Create Typer app
app = typer.Typer(
    name="alt-migrator",
    help="Copy alt-text from an outbox export onto files in your drive",
    add_completion=False,
)


def register_commands() -> None:
    """Register all commands from feature modules."""
    from .migrate.commands import migrate

    app.command(name="migrate")(migrate)

    from .inspect.commands import list_attachments, list_folders

    app.command(name="list-attachments")(list_attachments)
    app.command(name="list-folders")(list_folders)


def get_log_dir() -> Path:
    """Log directory from ALT_MIGRATOR_LOG_DIR, defaulting to ./logs."""
    return Path(os.environ.get("ALT_MIGRATOR_LOG_DIR") or Path.cwd() / "logs")


def setup_logging(log_dir: Path | None = None) -> None:
    """Configure logging for CLI.

    - Suppresses console output from libraries
    - Writes API calls to drive_api.log and per-file outcomes to migration.log
    """
    if log_dir is None:
        log_dir = get_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)

    # Remove any default console handlers from root logger
    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(logging.CRITICAL)

    # Suppress loggers that might print to console
    for logger_name in ["httpx", "httpcore", "asyncio"]:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.WARNING)
        logger.propagate = False

    for logger_name, filename in [("drive_api", "drive_api.log"), ("migration", "migration.log")]:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        for handler in logger.handlers:
            handler.close()
        logger.handlers = []
        file_handler = logging.FileHandler(log_dir / filename, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)


@app.callback()
def _configure() -> None:
    """Copy alt-text from an outbox export onto files in your drive."""
    setup_logging()


# Register all commands
register_commands()


def main() -> None:
    """CLI entry point."""
    app()
