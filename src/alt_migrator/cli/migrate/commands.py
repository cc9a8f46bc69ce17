"""Migrate CLI command - thin wrapper orchestrating params, validation, display, and service."""

from __future__ import annotations

import asyncio
from typing import Optional

import typer

from ...drive.models import DEFAULT_MAX_CONCURRENCY, DEFAULT_TIMEOUT
from ...errors import MigratorError
from ...outbox.parser import resolve_outbox_path
from ..core.console import console
from ..core.types import Failure
from . import service
from .display import (
    confirm_folder_message,
    create_update_progress,
    show_attachment_count,
    show_migrate_config,
    show_migrate_error,
    show_migration_summary,
    show_no_attachments,
    show_searching_folders,
)
from .params import MigrateParams
from .validators import validate_migrate_params


def migrate(
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
        help="API access token with drive write permission",
    ),
    outbox: str = typer.Option(
        ..., "--outbox", "-o",
        prompt="Enter the path to your outbox.json",
        help="Path to outbox.json or the unpacked export directory",
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Don't ask to confirm the detected folder"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Look up files without changing them"),
    skip_missing: bool = typer.Option(
        False, "--skip-missing", help="Skip attachments not found in the folder instead of aborting"
    ),
    concurrency: int = typer.Option(
        DEFAULT_MAX_CONCURRENCY, "--concurrency", "-c", help="Max concurrent folder listings"
    ),
    timeout: Optional[float] = typer.Option(
        DEFAULT_TIMEOUT, "--timeout", help="HTTP timeout in seconds (0 disables)"
    ),
) -> None:
    """Copy alt-text from an outbox export onto matching drive files.

    Finds the drive folder holding the archived attachments, asks for
    confirmation, then sets each file's alt-text in archive order.

    Use --dry-run to check which files would be updated.
    Use --skip-missing to carry on when a file can't be found.
    """
    params = MigrateParams.from_cli(
        instance=instance,
        access_token=access_token,
        outbox=outbox,
        yes=yes,
        dry_run=dry_run,
        skip_missing=skip_missing,
        concurrency=concurrency,
        timeout=timeout,
    )

    # Validate params (outbox path first, before any network call)
    validation = validate_migrate_params(params)
    if isinstance(validation, Failure):
        show_migrate_error(console, validation.error, validation.details)
        raise typer.Exit(1)

    outbox_path = resolve_outbox_path(params.outbox)
    config = params.to_drive_config()

    show_migrate_config(console, params, outbox_path)

    loaded = service.load_attachments(outbox_path)
    if isinstance(loaded, Failure):
        show_migrate_error(console, loaded.error, loaded.details)
        raise typer.Exit(1)

    attachments = loaded.value
    show_attachment_count(console, len(attachments))
    if not attachments:
        show_no_attachments(console)
        return

    try:
        show_searching_folders(console)
        located = asyncio.run(service.locate_attachments_folder(config, attachments))
        if isinstance(located, Failure):
            show_migrate_error(console, located.error, located.details)
            raise typer.Exit(1)

        folder = located.value
        if not params.assume_yes and not typer.confirm(
            confirm_folder_message(folder.display_path), default=True
        ):
            raise typer.Exit(0)

        with create_update_progress(console) as progress:
            label = "Checking images..." if params.dry_run else "Updating images..."
            task = progress.add_task(label, total=len(attachments))

            async def on_progress(_result) -> None:
                progress.advance(task)

            updated = asyncio.run(
                service.run_updates(
                    config,
                    folder,
                    attachments,
                    on_missing=params.on_missing,
                    dry_run=params.dry_run,
                    progress_callback=on_progress,
                )
            )
    except MigratorError as e:
        show_migrate_error(console, str(e))
        raise typer.Exit(1)

    if isinstance(updated, Failure):
        show_migrate_error(console, updated.error, updated.details)
        raise typer.Exit(1)

    show_migration_summary(console, updated.value, params.dry_run)
