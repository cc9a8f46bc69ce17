"""Immutable parameter dataclass for the migrate command."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ...drive.models import DEFAULT_MAX_CONCURRENCY, DEFAULT_TIMEOUT, DriveConfig


@dataclass(frozen=True)
class MigrateParams:
    """Immutable parameters for an alt-text migration run."""

    instance: str
    access_token: str
    outbox: str
    assume_yes: bool
    dry_run: bool
    skip_missing: bool
    concurrency: int
    timeout: Optional[float]

    @classmethod
    def from_cli(
        cls,
        instance: str,
        access_token: str,
        outbox: str,
        yes: bool = False,
        dry_run: bool = False,
        skip_missing: bool = False,
        concurrency: int = DEFAULT_MAX_CONCURRENCY,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
    ) -> "MigrateParams":
        """Create params from raw CLI arguments."""
        return cls(
            instance=instance.strip(),
            access_token=access_token.strip(),
            outbox=outbox.strip(),
            assume_yes=yes,
            dry_run=dry_run,
            skip_missing=skip_missing,
            concurrency=concurrency,
            timeout=timeout,
        )

    @property
    def on_missing(self) -> str:
        return "skip" if self.skip_missing else "abort"

    def to_drive_config(self) -> DriveConfig:
        return DriveConfig.from_cli(
            instance=self.instance,
            access_token=self.access_token,
            timeout=self.timeout,
            max_concurrency=self.concurrency,
        )
