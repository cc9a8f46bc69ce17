"""Pure validation functions for CLI arguments."""

from __future__ import annotations

from pathlib import Path

from ...drive.models import normalize_instance_url
from ...outbox.parser import resolve_outbox_path
from .types import Result, Success, Failure


def validate_outbox_path(path: str | Path) -> Result[Path]:
    """Validate that the outbox file exists.

    Only reads the filesystem. A directory resolves to the
    ``outbox.json`` inside it.

    Args:
        path: Path as typed by the user

    Returns:
        Result containing the resolved outbox path or failure
    """
    resolved = resolve_outbox_path(path)
    if not resolved.is_file():
        return Failure(
            f'Couldn\'t find "{resolved}", is the path correct?',
            {"path": str(resolved)},
        )
    return Success(resolved)


def validate_instance_url(instance: str) -> Result[str]:
    """Validate and normalize the instance URL.

    Args:
        instance: Host name or URL, with or without scheme

    Returns:
        Result containing the normalized base URL or failure
    """
    if not instance or not instance.strip():
        return Failure("Instance URL is required", {"env_var": "ALT_MIGRATOR_INSTANCE"})
    return Success(normalize_instance_url(instance))


def validate_access_token(token: str) -> Result[str]:
    """Validate that an access token was provided."""
    if not token or not token.strip():
        return Failure("Access token is required", {"env_var": "ALT_MIGRATOR_TOKEN"})
    return Success(token.strip())


def validate_concurrency(value: int, min_value: int = 1, max_value: int = 64) -> Result[int]:
    """Validate the folder walk concurrency limit is within bounds."""
    if value < min_value or value > max_value:
        return Failure(
            f"Concurrency must be between {min_value} and {max_value}, got {value}",
            {"min": min_value, "max": max_value},
        )
    return Success(value)
