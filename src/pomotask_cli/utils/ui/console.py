"""Shared Rich console for PomoTask CLI."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=2)
def get_console(highlight: bool = False) -> Console:
    """Return the process-wide console used by prompts, listings and the timer.

    Highlighting is off unless asked for: task descriptions and the
    ``Time remaining`` line are printed as plain text.
    """
    return Console(highlight=highlight)
