"""Display functions for the migrate command - pure functions for Rich output."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TextColumn,
    TimeElapsedColumn,
)

from .params import MigrateParams
from .service import MigrationSummary


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return ``"<count> <noun>"`` with the noun matching the count."""
    noun = singular if count == 1 else (plural or f"{singular}s")
    return f"{count} {noun}"


def show_migrate_config(console: Console, params: MigrateParams, outbox_path: Path) -> None:
    """Display migration configuration."""
    mode = "Dry run (lookup only)" if params.dry_run else "Update alt-text"
    missing = "Skip and continue" if params.skip_missing else "Abort"

    console.print(Panel(
        f"Instance: [cyan]{params.to_drive_config().instance_url}[/cyan]\n"
        f"Outbox: [cyan]{outbox_path}[/cyan]\n"
        f"Mode: [yellow]{mode}[/yellow]\n"
        f"Missing files: [yellow]{missing}[/yellow]",
        title="Alt-Text Migration",
    ))


def show_attachment_count(console: Console, count: int) -> None:
    """Display how many attachments were found in the archive."""
    console.print(f"Found [bold]{pluralize(count, 'attachment')}[/bold] to update.")


def show_no_attachments(console: Console) -> None:
    """Display message when the archive has no attachments."""
    console.print("[yellow]No attachments found in the outbox. Nothing to do.[/yellow]")


def show_searching_folders(console: Console) -> None:
    console.print("[dim]Searching your drive for the attachments folder...[/dim]")


def confirm_folder_message(folder_path: str) -> str:
    """Question shown before any file is touched."""
    return (
        f'It looks like the images are in your drive folder "{folder_path}". '
        "Does that look right?"
    )


def show_migrate_error(console: Console, message: str, details: dict | None = None) -> None:
    """Display an error with optional details."""
    console.print(f"[red]Error: {escape(message)}[/red]")
    if details:
        for key, value in details.items():
            console.print(f"  [dim]{key}:[/dim] [yellow]{escape(str(value))}[/yellow]")


def create_update_progress(console: Console) -> Progress:
    """Progress bar advanced once per processed attachment."""
    return Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
    )


def show_migration_summary(console: Console, summary: MigrationSummary, dry_run: bool) -> None:
    """Display migration results."""
    if dry_run:
        console.print(Panel(
            f"[yellow]Dry run complete[/yellow]\n\n"
            f"Would update: [green]{summary.would_update}[/green]\n"
            f"Missing: [dim]{summary.skipped}[/dim]",
            title="Dry Run Results",
            border_style="yellow",
        ))
        _show_skipped(console, summary)
        return

    if summary.skipped == 0:
        console.print(Panel(
            f"[bold green]Done! Your images should now have alt text.[/bold green]\n\n"
            f"Updated: [green]{summary.updated}[/green]",
            title="Complete",
            border_style="green",
        ))
    else:
        console.print(Panel(
            f"[yellow]Done, but some files were not found[/yellow]\n\n"
            f"Updated: [green]{summary.updated}[/green]\n"
            f"Skipped: [red]{summary.skipped}[/red]",
            title="Complete",
            border_style="yellow",
        ))
        _show_skipped(console, summary)


def _show_skipped(console: Console, summary: MigrationSummary) -> None:
    for result in summary.results:
        if result.action == "skipped":
            console.print(f"  [dim]-[/dim] {escape(result.attachment.filename)}")
