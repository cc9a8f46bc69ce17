"""Resolve archived attachments to drive files and set their alt-text."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Literal, Sequence

from ..errors import MigratorError
from ..outbox.models import Attachment
from .client import DriveClient
from .models import DriveFile, Folder

_logger = logging.getLogger("migration")

MissingPolicy = Literal["abort", "skip"]


class AttachmentNotFoundError(MigratorError):
    """No file with the attachment's name exists in the target folder."""

    def __init__(self, filename: str, folder: Folder):
        super().__init__(f'No file named "{filename}" in folder "{folder.display_path}"')
        self.filename = filename
        self.folder = folder


@dataclass(frozen=True)
class UpdateResult:
    """Outcome for a single attachment."""

    attachment: Attachment
    action: str  # "updated", "skipped", "would_update"
    file_id: str | None = None
    error: str | None = None


ProgressCallback = Callable[[UpdateResult], Awaitable[None]]


async def resolve_file(client: DriveClient, folder: Folder, filename: str) -> DriveFile:
    """Look up a file by name in ``folder``; the first match wins.

    Raises:
        AttachmentNotFoundError: If the folder has no such file.
    """
    files = await client.find_files(filename, folder.id)
    if not files:
        raise AttachmentNotFoundError(filename, folder)
    return files[0]


async def resolve_and_update(
    client: DriveClient,
    folder: Folder,
    filename: str,
    alt_text: str | None,
) -> DriveFile:
    """Set the alt-text of the file named ``filename`` in ``folder``.

    Issues exactly one lookup and one update call.

    Returns:
        The file that was updated (as it was before the update).
    """
    drive_file = await resolve_file(client, folder, filename)
    await client.update_file_comment(drive_file.id, alt_text)
    return drive_file


async def update_attachments(
    client: DriveClient,
    folder: Folder,
    attachments: Sequence[Attachment],
    on_missing: MissingPolicy = "abort",
    dry_run: bool = False,
    progress_callback: ProgressCallback | None = None,
) -> list[UpdateResult]:
    """Update every attachment, one at a time, in archive order.

    Args:
        client: Drive API client.
        folder: Folder confirmed to hold the attachments.
        attachments: Attachments in archive order.
        on_missing: "abort" re-raises when a file is missing, "skip"
            records it and moves on.
        dry_run: Only resolve files, never update them. Missing files
            are recorded as skipped whatever the policy.
        progress_callback: Awaited after each processed attachment.

    Returns:
        One UpdateResult per processed attachment.

    Raises:
        AttachmentNotFoundError: If a file is missing, on_missing is "abort"
            and this is not a dry run.
    """
    if on_missing not in ("abort", "skip"):
        raise ValueError(f"Unknown missing-file policy: {on_missing}")

    results: list[UpdateResult] = []

    for attachment in attachments:
        try:
            if dry_run:
                drive_file = await resolve_file(client, folder, attachment.filename)
                result = UpdateResult(attachment, "would_update", file_id=drive_file.id)
            else:
                drive_file = await resolve_and_update(
                    client, folder, attachment.filename, attachment.alt_text
                )
                result = UpdateResult(attachment, "updated", file_id=drive_file.id)
        except AttachmentNotFoundError as e:
            if on_missing == "abort" and not dry_run:
                _logger.error(f"ABORT | {e}")
                raise
            result = UpdateResult(attachment, "skipped", error=str(e))

        _logger.info(f"{result.action.upper()} | {attachment.filename} | file_id={result.file_id}")
        results.append(result)

        if progress_callback:
            await progress_callback(result)

    return results
