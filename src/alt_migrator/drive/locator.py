"""Find the drive folder that holds the archived attachments."""

from __future__ import annotations

import logging
from typing import Iterable

from .client import DriveClient
from .models import Folder

_logger = logging.getLogger("migration")


async def find_folder_containing(
    client: DriveClient,
    folders: Iterable[Folder],
    sample_filename: str,
) -> Folder | None:
    """Return the first folder holding a file named ``sample_filename``.

    Folders are checked one at a time in the given order and the scan
    stops at the first hit.
    """
    for folder in folders:
        matching = await client.find_files(sample_filename, folder.id)
        if matching:
            _logger.info(f"Found '{sample_filename}' in '{folder.display_path}' ({folder.id})")
            return folder

    _logger.warning(f"No folder contains '{sample_filename}'")
    return None
