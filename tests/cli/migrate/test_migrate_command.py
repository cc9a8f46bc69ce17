"""End-to-end tests for the migrate command.

The real DriveClient runs against the in-memory FakeDrive by patching the
service's client factory.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from alt_migrator.cli import app
from alt_migrator.drive.client import DriveClient

# Must match the token the FakeDrive fixture accepts
TEST_TOKEN = "test-token-123"

runner = CliRunner()


def flatten(output: str) -> str:
    """Collapse whitespace so Rich line wrapping doesn't break assertions."""
    return " ".join(output.split())


def base_args(outbox: Path | str) -> list[str]:
    return [
        "migrate",
        "--instance", "drive.test",
        "--token", TEST_TOKEN,
        "--outbox", str(outbox),
    ]


@pytest.fixture
def patch_client(sample_drive):
    """Route every client the service creates to the sample drive."""
    def _factory(config):
        return DriveClient(config, transport=sample_drive.transport())

    with patch("alt_migrator.cli.migrate.service.create_client", side_effect=_factory) as mock:
        yield mock


@pytest.fixture
def cat_outbox(write_outbox, make_post) -> Path:
    return write_outbox([
        make_post(),
        make_post([{"url": "https://x/y/img1.png", "name": "A cat"}]),
    ])


class TestMigrateCommand:
    """Tests for the migrate command flow and exit codes."""

    def test_missing_outbox_exits_1_without_network(self, tmp_path: Path):
        missing = tmp_path / "nope" / "outbox.json"

        with patch("alt_migrator.cli.migrate.service.create_client") as mock_factory:
            result = runner.invoke(app, base_args(missing))

        assert result.exit_code == 1
        assert "Couldn't find" in flatten(result.output)
        assert "is the path correct?" in flatten(result.output)
        mock_factory.assert_not_called()

    def test_full_run_updates_alt_text(self, sample_drive, patch_client, cat_outbox):
        result = runner.invoke(app, base_args(cat_outbox) + ["--yes"])

        assert result.exit_code == 0, result.output
        output = flatten(result.output)
        assert "1 attachment" in output
        assert "1 attachments" not in output
        assert "Done!" in output
        assert sample_drive.file("file-1")["comment"] == "A cat"

    def test_confirm_accepted(self, sample_drive, patch_client, cat_outbox):
        result = runner.invoke(app, base_args(cat_outbox), input="y\n")

        assert result.exit_code == 0, result.output
        assert 'drive folder "Drive > Photos"' in flatten(result.output)
        assert sample_drive.file("file-1")["comment"] == "A cat"

    def test_declined_confirm_exits_0_without_updates(self, sample_drive, patch_client, cat_outbox):
        result = runner.invoke(app, base_args(cat_outbox), input="n\n")

        assert result.exit_code == 0
        assert sample_drive.calls("drive/files/update") == []
        assert sample_drive.file("file-1")["comment"] is None

    def test_no_folder_found_exits_1_before_updates(
        self, sample_drive, patch_client, write_outbox, make_post
    ):
        outbox = write_outbox([make_post([{"url": "https://x/y/unknown.png", "name": "?"}])])

        result = runner.invoke(app, base_args(outbox) + ["--yes"])

        assert result.exit_code == 1
        assert "Couldn't find a drive folder containing the attachments" in flatten(result.output)
        assert sample_drive.calls("drive/files/update") == []

    def test_plural_count(self, sample_drive, patch_client, write_outbox, make_post):
        outbox = write_outbox([make_post([
            {"url": "https://x/y/img1.png", "name": "one"},
            {"url": "https://x/y/img2.png", "name": "two"},
        ])])

        result = runner.invoke(app, base_args(outbox) + ["--yes"])

        assert result.exit_code == 0, result.output
        assert "2 attachments" in flatten(result.output)
        assert len(sample_drive.calls("drive/files/update")) == 2

    def test_zero_attachments_exits_0_without_network(self, write_outbox, make_post):
        outbox = write_outbox([make_post()])

        with patch("alt_migrator.cli.migrate.service.create_client") as mock_factory:
            result = runner.invoke(app, base_args(outbox))

        assert result.exit_code == 0
        assert "0 attachments" in flatten(result.output)
        mock_factory.assert_not_called()

    def test_missing_file_aborts_with_exit_1(self, sample_drive, patch_client, write_outbox, make_post):
        outbox = write_outbox([make_post([
            {"url": "https://x/y/img1.png", "name": "one"},
            {"url": "https://x/y/gone.png", "name": "gone"},
            {"url": "https://x/y/img2.png", "name": "two"},
        ])])

        result = runner.invoke(app, base_args(outbox) + ["--yes"])

        assert result.exit_code == 1
        assert "gone.png" in flatten(result.output)
        assert sample_drive.file("file-2")["comment"] is None

    def test_skip_missing_continues(self, sample_drive, patch_client, write_outbox, make_post):
        outbox = write_outbox([make_post([
            {"url": "https://x/y/img1.png", "name": "one"},
            {"url": "https://x/y/gone.png", "name": "gone"},
            {"url": "https://x/y/img2.png", "name": "two"},
        ])])

        result = runner.invoke(app, base_args(outbox) + ["--yes", "--skip-missing"])

        assert result.exit_code == 0, result.output
        assert "Skipped: 1" in flatten(result.output)
        assert sample_drive.file("file-2")["comment"] == "two"

    def test_dry_run_changes_nothing(self, sample_drive, patch_client, cat_outbox):
        result = runner.invoke(app, base_args(cat_outbox) + ["--yes", "--dry-run"])

        assert result.exit_code == 0, result.output
        assert "Would update: 1" in flatten(result.output)
        assert sample_drive.calls("drive/files/update") == []

    def test_dry_run_reports_every_missing_file(self, sample_drive, patch_client, write_outbox, make_post):
        outbox = write_outbox([make_post([
            {"url": "https://x/y/img1.png", "name": "A cat"},
            {"url": "https://x/y/gone.png", "name": "missing"},
            {"url": "https://x/y/lost.png", "name": "also missing"},
        ])])

        result = runner.invoke(app, base_args(outbox) + ["--yes", "--dry-run"])

        output = flatten(result.output)
        assert result.exit_code == 0, result.output
        assert "Would update: 1" in output
        assert "Missing: 2" in output
        assert "gone.png" in output
        assert "lost.png" in output
        assert sample_drive.calls("drive/files/update") == []

    def test_bad_token_reports_api_error(self, sample_drive, patch_client, cat_outbox):
        args = base_args(cat_outbox)
        args[args.index(TEST_TOKEN)] = "wrong-token"

        result = runner.invoke(app, args + ["--yes"])

        assert result.exit_code == 1
        assert "Credential required" in flatten(result.output)

    def test_directory_outbox_path(self, sample_drive, patch_client, cat_outbox):
        result = runner.invoke(app, base_args(cat_outbox.parent) + ["--yes"])

        assert result.exit_code == 0, result.output
        assert sample_drive.file("file-1")["comment"] == "A cat"

    def test_credentials_from_environment(self, sample_drive, patch_client, cat_outbox, monkeypatch):
        monkeypatch.setenv("ALT_MIGRATOR_INSTANCE", "drive.test")
        monkeypatch.setenv("ALT_MIGRATOR_TOKEN", TEST_TOKEN)

        result = runner.invoke(app, ["migrate", "--outbox", str(cat_outbox), "--yes"])

        assert result.exit_code == 0, result.output
        config = patch_client.call_args.args[0]
        assert config.instance_url == "https://drive.test"

    def test_invalid_concurrency_rejected(self, cat_outbox):
        result = runner.invoke(app, base_args(cat_outbox) + ["--concurrency", "0"])

        assert result.exit_code == 1
        assert "Concurrency" in flatten(result.output)

    def test_writes_log_files(self, sample_drive, patch_client, cat_outbox, tmp_path: Path):
        runner.invoke(app, base_args(cat_outbox) + ["--yes"])

        api_log = (tmp_path / "logs" / "drive_api.log").read_text(encoding="utf-8")
        assert "POST drive/files/update" in api_log
        assert TEST_TOKEN not in api_log
