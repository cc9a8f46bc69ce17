"""Stateless service for alt-text migration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence

from ...drive.client import DriveClient
from ...drive.locator import find_folder_containing
from ...drive.models import DriveConfig, Folder
from ...drive.updater import (
    AttachmentNotFoundError,
    ProgressCallback,
    UpdateResult,
    update_attachments,
)
from ...drive.walker import list_all_folders
from ...outbox.models import Attachment
from ...outbox.parser import OutboxError, extract_attachments, load_outbox
from ..core.types import Result, Success, Failure

_logger = logging.getLogger("migration")


@dataclass
class MigrationSummary:
    """Aggregated outcome of an update run."""

    results: List[UpdateResult] = field(default_factory=list)

    def count(self, action: str) -> int:
        return sum(1 for r in self.results if r.action == action)

    @property
    def updated(self) -> int:
        return self.count("updated")

    @property
    def skipped(self) -> int:
        return self.count("skipped")

    @property
    def would_update(self) -> int:
        return self.count("would_update")


def create_client(config: DriveConfig) -> DriveClient:
    """Create the API client for a run."""
    return DriveClient(config)


def load_attachments(outbox_path: Path) -> Result[List[Attachment]]:
    """Parse the outbox file into attachments, in archive order."""
    try:
        outbox = load_outbox(outbox_path)
    except OutboxError as e:
        return Failure(str(e), {"path": str(outbox_path)})
    return Success(extract_attachments(outbox))


async def discover_folders(config: DriveConfig) -> List[Folder]:
    """Walk the whole drive and return every folder with its path."""
    async with create_client(config) as client:
        folders = await list_all_folders(client, max_concurrency=config.max_concurrency)
    _logger.info(f"Discovered {len(folders)} folder(s)")
    return folders


async def locate_attachments_folder(
    config: DriveConfig,
    attachments: Sequence[Attachment],
) -> Result[Folder]:
    """Find the folder holding the archived attachments.

    The first attachment's filename is used as the sample.
    """
    async with create_client(config) as client:
        folders = await list_all_folders(client, max_concurrency=config.max_concurrency)
        _logger.info(f"Discovered {len(folders)} folder(s)")

        sample = attachments[0].filename
        folder = await find_folder_containing(client, folders, sample)

    if folder is None:
        return Failure(
            "Couldn't find a drive folder containing the attachments.",
            {"sample_file": sample, "folders_searched": len(folders)},
        )
    return Success(folder)


async def run_updates(
    config: DriveConfig,
    folder: Folder,
    attachments: Sequence[Attachment],
    on_missing: str = "abort",
    dry_run: bool = False,
    progress_callback: ProgressCallback | None = None,
) -> Result[MigrationSummary]:
    """Apply alt-text to every attachment in ``folder``."""
    async with create_client(config) as client:
        try:
            results = await update_attachments(
                client,
                folder,
                attachments,
                on_missing=on_missing,
                dry_run=dry_run,
                progress_callback=progress_callback,
            )
        except AttachmentNotFoundError as e:
            return Failure(
                str(e),
                {"hint": "Re-run with --skip-missing to continue past missing files"},
            )

    return Success(MigrationSummary(results=results))
