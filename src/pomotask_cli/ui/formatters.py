"""Output formatters for messages and task listings."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pomotask_cli.models import CompletedStack, SessionQueue, TaskStore
from pomotask_cli.utils.ui.console import get_console


def _console(console: Console | None) -> Console:
    return console if console is not None else get_console()


def format_error(message: str, console: Console | None = None) -> None:
    """Format and display an error message."""
    _console(console).print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str, console: Console | None = None) -> None:
    """Format and display a success message."""
    _console(console).print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str, console: Console | None = None) -> None:
    """Format and display a warning message."""
    _console(console).print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str, console: Console | None = None) -> None:
    """Format and display an info message."""
    _console(console).print(f"[bold blue]Info:[/bold blue] {message}")


def _print_listing(title: str, descriptions: list[str], console: Console) -> None:
    console.print(f"[bold]{title}[/bold]")
    for description in descriptions:
        # Descriptions are user text; no markup and no :emoji: codes.
        console.print(f"- {escape(description)}", emoji=False)


def display_tasks(store: TaskStore, console: Console | None = None) -> None:
    """Print active tasks, most recently added first."""
    _print_listing("Tasks:", store.descriptions(), _console(console))


def display_completed_tasks(stack: CompletedStack, console: Console | None = None) -> None:
    """Print completed tasks from the top of the stack down."""
    _print_listing("Completed Tasks:", stack.descriptions(), _console(console))


def display_scheduled_sessions(queue: SessionQueue, console: Console | None = None) -> None:
    """Print queued sessions from front to rear."""
    _print_listing("Scheduled Pomodoro Sessions:", queue.descriptions(), _console(console))


def format_config_table(data: dict[str, Any], console: Console | None = None) -> None:
    """Format a nested configuration dictionary as a key/value table."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Key")
    table.add_column("Value")

    for section, values in data.items():
        if isinstance(values, dict):
            for key, value in values.items():
                table.add_row(f"{section}.{key}", str(value))
        else:
            table.add_row(section, str(values))

    _console(console).print(table)
