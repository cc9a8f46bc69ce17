"""Data models for the remote drive API."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TIMEOUT = 60.0
DEFAULT_MAX_CONCURRENCY = 8

# Separator between folder names in a breadcrumb path
PATH_SEPARATOR = " > "


def normalize_instance_url(instance: str) -> str:
    """Prepend ``https://`` when no scheme is given and drop trailing slashes."""
    instance = instance.strip()
    if not (instance.startswith("https://") or instance.startswith("http://")):
        instance = f"https://{instance}"
    return instance.rstrip("/")


@dataclass(frozen=True)
class DriveConfig:
    """Connection settings for a single instance."""

    instance_url: str
    access_token: str
    timeout: float | None = DEFAULT_TIMEOUT
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY

    @classmethod
    def from_cli(
        cls,
        instance: str,
        access_token: str,
        timeout: float | None = DEFAULT_TIMEOUT,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
    ) -> "DriveConfig":
        """Build config from raw CLI input, normalizing the instance URL.

        A timeout of zero or less disables the HTTP timeout.
        """
        if timeout is not None and timeout <= 0:
            timeout = None
        return cls(
            instance_url=normalize_instance_url(instance),
            access_token=access_token.strip(),
            timeout=timeout,
            max_concurrency=max_concurrency,
        )

    @property
    def api_base(self) -> str:
        return f"{self.instance_url}/api"


class Folder(BaseModel):
    """A drive folder.

    ``path`` is the breadcrumb assigned during a tree walk, e.g.
    ``"Drive > Photos"``. Folders returned directly by the API have none.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    name: str
    parent_id: str | None = Field(default=None, alias="parentId")
    path: str | None = None

    @property
    def display_path(self) -> str:
        return self.path or self.name


class DriveFile(BaseModel):
    """A file stored in the drive. ``comment`` holds its alt-text."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    name: str
    comment: str | None = None
    folder_id: str | None = Field(default=None, alias="folderId")
