"""Line-oriented console input for the interactive menu."""

from __future__ import annotations

from collections.abc import Callable

from rich.console import Console

from pomotask_cli.errors import InvalidChoiceError, InvalidSessionCountError
from pomotask_cli.utils.ui.console import get_console

LineReader = Callable[[str], str]


def console_reader(console: Console | None = None) -> LineReader:
    """Return a reader that prompts on *console* and returns the typed line.

    The reader raises EOFError when input is exhausted.
    """
    con = console if console is not None else get_console()

    def read(prompt: str) -> str:
        return con.input(prompt)

    return read


def parse_choice(raw: str, choices: tuple[int, ...]) -> int:
    """Parse a menu choice.

    Raises:
        InvalidChoiceError: if *raw* is not an integer in *choices*
    """
    try:
        choice = int(raw.strip())
    except ValueError as e:
        raise InvalidChoiceError(raw) from e
    if choice not in choices:
        raise InvalidChoiceError(raw)
    return choice


def parse_session_count(raw: str) -> int:
    """Parse a session count; negative values mean no sessions.

    Raises:
        InvalidSessionCountError: if *raw* is not an integer
    """
    try:
        count = int(raw.strip())
    except ValueError as e:
        raise InvalidSessionCountError(raw) from e
    return max(0, count)


def ask_session_count(read: LineReader, console: Console | None = None) -> int:
    """Prompt until a valid session count is entered. End of input means 0."""
    con = console if console is not None else get_console()
    while True:
        try:
            raw = read("Enter number of pomodoro sessions to be scheduled: ")
        except EOFError:
            con.print()
            return 0
        try:
            return parse_session_count(raw)
        except InvalidSessionCountError:
            con.print("[yellow]Please enter a whole number.[/yellow]")
