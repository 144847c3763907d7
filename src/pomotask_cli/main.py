"""Main entry point for PomoTask CLI."""

import typer

from pomotask_cli import __version__
from pomotask_cli.commands import config
from pomotask_cli.commands.run_command import run
from pomotask_cli.utils.typer_helpers import SuggestingGroup
from pomotask_cli.utils.ui.console import get_console

app = typer.Typer(
    name="pomotask",
    cls=SuggestingGroup,
    help="Task list and Pomodoro focus timer for the terminal",
    no_args_is_help=True,
)

console = get_console()

app.add_typer(config.app, name="config", help="Configuration management")
app.command("run")(run)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]PomoTask CLI[/bold] version [cyan]{__version__}[/cyan]")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
