"""Display utilities for CLI output."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from termline.domain import Signal

console = Console(highlight=False)


def _visible(data: bytes) -> str:
    """Render bytes with control characters made visible."""
    text = data.decode("utf-8", errors="replace")
    return text.replace("\r", "\\r").replace("\n", "\\n\n").replace("\x1b", "\\e")


def display_entries(entries: list[str], start: int = 0, title: str = "History") -> None:
    """Print history entries with their index.

    Args:
        entries: Entries to show, oldest first.
        start: Index of the first entry in the full history.
        title: Table title.
    """
    if not entries:
        console.print("[dim]No history entries[/dim]")
        return

    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Entry")
    for offset, entry in enumerate(entries):
        table.add_row(str(start + offset), Text(entry))
    console.print(table)


def display_matches(term: str, matches: list[str], direction: str) -> None:
    """Print search matches in the order the search visited them."""
    if not matches:
        console.print(f"[yellow]No entries match[/yellow] {escape(repr(term))}")
        return

    table = Table(title=f"Matches for {escape(repr(term))} ({direction})")
    table.add_column("Step", justify="right", style="dim")
    table.add_column("Entry")
    for step, entry in enumerate(matches, start=1):
        table.add_row(str(step), Text(entry))
    console.print(table)


def display_replay(echo: bytes, lines: list[str], signals: list[Signal]) -> None:
    """Print the outcome of a replay: echo, delivered lines and signals."""
    console.print("[bold]Echo[/bold]")
    if echo:
        console.print(_visible(echo), markup=False)
    else:
        console.print("[dim](none)[/dim]")

    table = Table(title="Delivered lines")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Line")
    for number, line in enumerate(lines, start=1):
        table.add_row(str(number), Text(line))
    console.print(table)

    if signals:
        console.print("[bold]Signals:[/bold] " + ", ".join(s.value for s in signals))
    else:
        console.print("[dim]No signals raised[/dim]")
