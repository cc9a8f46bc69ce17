"""Read an exported outbox and pull out its media attachments."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..errors import MigratorError
from .models import Attachment

_logger = logging.getLogger("migration")

# Name of the activity file inside an unpacked export
OUTBOX_FILENAME = "outbox.json"


class OutboxError(MigratorError):
    """The outbox file could not be read or has no activity list."""


def resolve_outbox_path(path: str | Path) -> Path:
    """Resolve the user-supplied path to an absolute outbox file path.

    A directory is taken to be an unpacked export and resolves to the
    ``outbox.json`` inside it. The result is not checked for existence.
    """
    resolved = Path(path).expanduser().resolve()
    if resolved.is_dir():
        return resolved / OUTBOX_FILENAME
    return resolved


def load_outbox(path: Path) -> dict[str, Any]:
    """Load and minimally check an outbox document.

    Raises:
        OutboxError: If the file is unreadable, not JSON, or has no
            ``orderedItems`` list.
    """
    try:
        with open(path, encoding="utf-8") as f:
            outbox = json.load(f)
    except OSError as e:
        raise OutboxError(f"Could not read {path}: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise OutboxError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(outbox, dict) or not isinstance(outbox.get("orderedItems"), list):
        raise OutboxError(f'{path} has no "orderedItems" list')

    return outbox


def extract_attachments(outbox: dict[str, Any]) -> list[Attachment]:
    """Collect attachments from every activity, in archive order.

    Activities whose ``object`` is not an object (boosts carry a bare
    URL) or has no attachments are ignored, as are descriptors without
    a ``url``.
    """
    attachments: list[Attachment] = []

    for item in outbox.get("orderedItems", []):
        if not isinstance(item, dict):
            continue
        post = item.get("object")
        if not isinstance(post, dict):
            continue
        descriptors = post.get("attachment")
        if not isinstance(descriptors, list) or not descriptors:
            continue

        for descriptor in descriptors:
            if not isinstance(descriptor, dict) or not isinstance(descriptor.get("url"), str):
                _logger.debug(f"Skipping attachment without url in {post.get('id')}")
                continue
            attachments.append(Attachment.from_descriptor(descriptor))

    _logger.info(f"Extracted {len(attachments)} attachment(s) from outbox")
    return attachments
