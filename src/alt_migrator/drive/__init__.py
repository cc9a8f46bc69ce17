"""Remote drive access: API client, folder discovery and alt-text updates."""

from .client import DriveAPIError, DriveClient
from .locator import find_folder_containing
from .models import DriveConfig, DriveFile, Folder, normalize_instance_url
from .updater import (
    AttachmentNotFoundError,
    UpdateResult,
    resolve_and_update,
    resolve_file,
    update_attachments,
)
from .walker import list_all_folders

__all__ = [
    "DriveAPIError",
    "DriveClient",
    "DriveConfig",
    "DriveFile",
    "Folder",
    "normalize_instance_url",
    "list_all_folders",
    "find_folder_containing",
    "AttachmentNotFoundError",
    "UpdateResult",
    "resolve_file",
    "resolve_and_update",
    "update_attachments",
]
