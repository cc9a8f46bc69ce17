"""Shared test fixtures and configuration.

Provides an in-memory drive served through ``httpx.MockTransport`` so the
real DriveClient can be exercised without network access, plus helpers
for writing outbox files.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

from alt_migrator.drive.client import DriveClient
from alt_migrator.drive.models import DriveConfig

TEST_TOKEN = "test-token-123"


class FakeDrive:
    """Minimal in-memory drive answering the three endpoints the migrator uses.

    Folders are dicts with ``id``, ``name`` and ``parentId``; files are
    dicts with ``id``, ``name``, ``folderId`` and ``comment``. Every
    request is recorded as ``(endpoint, body)``.
    """

    def __init__(
        self,
        folders: list[dict[str, Any]] | None = None,
        files: list[dict[str, Any]] | None = None,
        token: str = TEST_TOKEN,
    ):
        self.folders = folders or []
        self.files = files or []
        self.token = token
        self.requests: list[tuple[str, dict[str, Any]]] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        endpoint = request.url.path.split("/api/", 1)[1]
        body = json.loads(request.content)
        self.requests.append((endpoint, body))

        if body.get("i") != self.token:
            return httpx.Response(
                401,
                json={"error": {"message": "Credential required.", "code": "CREDENTIAL_REQUIRED"}},
            )

        if endpoint == "drive/folders":
            parent = body.get("folderId")
            return httpx.Response(
                200, json=[f for f in self.folders if f.get("parentId") == parent]
            )

        if endpoint == "drive/files/find":
            return httpx.Response(200, json=[
                f for f in self.files
                if f["name"] == body.get("name") and f.get("folderId") == body.get("folderId")
            ])

        if endpoint == "drive/files/update":
            for f in self.files:
                if f["id"] == body.get("fileId"):
                    if "comment" in body:
                        f["comment"] = body["comment"]
                    return httpx.Response(200, json=f)
            return httpx.Response(
                400,
                json={"error": {"message": "No such file.", "code": "NO_SUCH_FILE"}},
            )

        return httpx.Response(404, json={"error": {"message": "Unknown API endpoint.", "code": "NO_SUCH_ENDPOINT"}})

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def calls(self, endpoint: str) -> list[dict[str, Any]]:
        """Request bodies sent to ``endpoint``, in order."""
        return [body for ep, body in self.requests if ep == endpoint]

    def file(self, file_id: str) -> dict[str, Any]:
        return next(f for f in self.files if f["id"] == file_id)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep log files and credentials from leaking between tests."""
    monkeypatch.setenv("ALT_MIGRATOR_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("ALT_MIGRATOR_INSTANCE", raising=False)
    monkeypatch.delenv("ALT_MIGRATOR_TOKEN", raising=False)


@pytest.fixture
def drive_config() -> DriveConfig:
    """Config pointing at a fake instance."""
    return DriveConfig.from_cli("drive.test", TEST_TOKEN)


@pytest.fixture
def sample_drive() -> FakeDrive:
    """Drive with folders Drive, Drive > Photos, Drive > Docs.

    ``Drive > Photos`` holds img1.png and img2.png; ``Drive > Docs``
    holds notes.txt.
    """
    return FakeDrive(
        folders=[
            {"id": "f-drive", "name": "Drive", "parentId": None},
            {"id": "f-photos", "name": "Photos", "parentId": "f-drive"},
            {"id": "f-docs", "name": "Docs", "parentId": "f-drive"},
        ],
        files=[
            {"id": "file-1", "name": "img1.png", "folderId": "f-photos", "comment": None},
            {"id": "file-2", "name": "img2.png", "folderId": "f-photos", "comment": None},
            {"id": "file-3", "name": "notes.txt", "folderId": "f-docs", "comment": None},
        ],
    )


@pytest.fixture
def make_client(drive_config: DriveConfig) -> Callable[[FakeDrive], DriveClient]:
    """Factory for a DriveClient wired to a FakeDrive."""
    def _make(drive: FakeDrive) -> DriveClient:
        return DriveClient(drive_config, transport=drive.transport())

    return _make


@pytest.fixture
def fake_drive() -> type[FakeDrive]:
    """The FakeDrive class, for tests that need a custom tree."""
    return FakeDrive


@pytest.fixture
def make_post() -> Callable[..., dict]:
    """Build an outbox activity wrapping a note with the given attachments."""
    def _make(attachments: list[dict[str, Any]] | None = None, activity_type: str = "Create") -> dict:
        note: dict[str, Any] = {"id": "https://x/statuses/1", "type": "Note", "content": "<p>hi</p>"}
        if attachments is not None:
            note["attachment"] = attachments
        return {"type": activity_type, "object": note}

    return _make


@pytest.fixture
def write_outbox(tmp_path: Path) -> Callable[[list[dict]], Path]:
    """Write an outbox.json holding the given activities and return its path."""
    def _write(items: list[dict], name: str = "outbox.json") -> Path:
        path = tmp_path / name
        path.write_text(
            json.dumps({"type": "OrderedCollection", "orderedItems": items}),
            encoding="utf-8",
        )
        return path

    return _write
