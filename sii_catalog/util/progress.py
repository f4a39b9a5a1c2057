"""
Progress tracking and reporting utilities using rich.
"""

from collections.abc import Callable
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)

console = Console()


def create_progress_bar() -> Progress:
    """
    Create a rich Progress bar with custom formatting.

    Returns:
        Configured Progress instance
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
    )


@contextmanager
def folder_progress(total: int) -> Iterator[Callable[[Path], None]]:
    """
    Show a progress bar over model folders.

    Usage:
        with folder_progress(total=len(folders)) as on_folder:
            report = scan_tree(config, on_folder=on_folder)

    Args:
        total: Number of folders that will be scanned

    Yields:
        Callback to invoke once per folder
    """
    progress = create_progress_bar()
    with progress:
        task = progress.add_task("Scanning", total=total)

        def on_folder(folder: Path) -> None:
            progress.update(task, advance=1, description=f"Scanning {folder.name}")

        yield on_folder


def show_summary(title: str, items: dict[str, str | int]):
    """
    Show a formatted summary box.

    Args:
        title: Summary title
        items: Dictionary of items to show (key: value pairs)
    """
    from rich.panel import Panel
    from rich.table import Table

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in items.items():
        table.add_row(key, str(value))

    panel = Panel(table, title=f"[bold]{title}[/bold]", border_style="blue")
    console.print(panel)


def show_skipped(skipped: list, limit: int = 20):
    """Print skipped files and folders with their reasons."""
    if not skipped:
        return
    console.print(f"\n[yellow]Skipped {len(skipped)} item(s):[/yellow]")
    for item in skipped[:limit]:
        console.print(f"  [dim]{item.path}[/dim]: {item.reason}")
    if len(skipped) > limit:
        console.print(f"  [dim]... and {len(skipped) - limit} more[/dim]")
