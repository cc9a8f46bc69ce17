"""Outbox archive parsing."""

from .models import Attachment, filename_from_url
from .parser import (
    OUTBOX_FILENAME,
    OutboxError,
    extract_attachments,
    load_outbox,
    resolve_outbox_path,
)

__all__ = [
    "Attachment",
    "filename_from_url",
    "OUTBOX_FILENAME",
    "OutboxError",
    "extract_attachments",
    "load_outbox",
    "resolve_outbox_path",
]
