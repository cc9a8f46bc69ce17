"""Inspect CLI commands - read-only views of the outbox and the drive."""

from __future__ import annotations

import asyncio

import typer

from ...drive.models import DEFAULT_MAX_CONCURRENCY, DriveConfig
from ...errors import MigratorError
from ..core.console import console
from ..core.types import Failure
from ..core.validators import (
    validate_access_token,
    validate_concurrency,
    validate_instance_url,
    validate_outbox_path,
)
from ..migrate import service
from ..migrate.display import show_migrate_error
from .display import show_attachments_table, show_folders_table


def list_attachments(
    outbox: str = typer.Option(
        ..., "--outbox", "-o",
        prompt="Enter the path to your outbox.json",
        help="Path to outbox.json or the unpacked export directory",
    ),
) -> None:
    """List the attachments found in an outbox export. No network access."""
    path_result = validate_outbox_path(outbox)
    if isinstance(path_result, Failure):
        show_migrate_error(console, path_result.error, path_result.details)
        raise typer.Exit(1)

    loaded = service.load_attachments(path_result.value)
    if isinstance(loaded, Failure):
        show_migrate_error(console, loaded.error, loaded.details)
        raise typer.Exit(1)

    show_attachments_table(console, loaded.value)


def list_folders(
    instance: str = typer.Option(
        ..., "--instance", "-i",
        envvar="ALT_MIGRATOR_INSTANCE",
        prompt="Enter the url of your instance",
        help="Instance URL (https:// is added if missing)",
    ),
    access_token: str = typer.Option(
        ..., "--token", "-t",
        envvar="ALT_MIGRATOR_TOKEN",
        prompt="Enter your access token",
        hide_input=True,
        help="API access token",
    ),
    concurrency: int = typer.Option(
        DEFAULT_MAX_CONCURRENCY, "--concurrency", "-c", help="Max concurrent folder listings"
    ),
) -> None:
    """List every folder in your drive with its full path."""
    for result in (
        validate_instance_url(instance),
        validate_access_token(access_token),
        validate_concurrency(concurrency),
    ):
        if isinstance(result, Failure):
            show_migrate_error(console, result.error, result.details)
            raise typer.Exit(1)

    config = DriveConfig.from_cli(instance, access_token, max_concurrency=concurrency)

    try:
        folders = asyncio.run(service.discover_folders(config))
    except MigratorError as e:
        show_migrate_error(console, str(e))
        raise typer.Exit(1)

    show_folders_table(console, folders)
