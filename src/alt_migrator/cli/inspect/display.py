"""Display functions for inspect commands - pure functions for Rich output."""

from __future__ import annotations

from typing import List

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...drive.models import Folder
from ...outbox.models import Attachment


def show_attachments_table(console: Console, attachments: List[Attachment]) -> None:
    """Display table of attachments parsed from the outbox."""
    if not attachments:
        console.print("[yellow]No attachments found.[/yellow]")
        return

    table = Table(title=f"Outbox Attachments ({len(attachments)})")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Filename", style="cyan")
    table.add_column("Alt text", style="green")

    for i, attachment in enumerate(attachments, 1):
        alt = escape(attachment.alt_text) if attachment.has_alt_text else "[dim]-[/dim]"
        table.add_row(str(i), escape(attachment.filename), alt)

    console.print(table)


def show_folders_table(console: Console, folders: List[Folder]) -> None:
    """Display table of drive folders with their breadcrumb paths."""
    if not folders:
        console.print("[yellow]No folders found in your drive.[/yellow]")
        return

    table = Table(title=f"Drive Folders ({len(folders)})")
    table.add_column("Path", style="cyan")
    table.add_column("ID", style="dim")

    for folder in sorted(folders, key=lambda f: f.display_path):
        table.add_row(escape(folder.display_path), folder.id)

    console.print(table)
