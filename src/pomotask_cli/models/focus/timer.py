"""Blocking countdown timer for focus and break intervals."""

from __future__ import annotations

import time
from collections.abc import Callable

from rich.console import Console

from pomotask_cli.utils.logger import get_logger
from pomotask_cli.utils.ui.console import get_console


def format_remaining(seconds: int) -> str:
    """Format a number of seconds as MM:SS."""
    seconds = max(0, int(seconds))
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


class Timer:
    """Counts down a duration in seconds, redrawing one status line per tick.

    The clock and sleep functions are injectable so the countdown can be
    driven without waiting in real time.
    """

    def __init__(
        self,
        console: Console | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        tick_seconds: float = 1.0,
    ):
        self.console = console if console is not None else get_console()
        self.clock = clock
        self.sleep = sleep
        self.tick_seconds = tick_seconds
        self.logger = get_logger()

    def start(self, duration: int, message: str) -> bool:
        """Run the countdown to completion.

        Returns True when the duration elapsed, False if the user pressed
        Ctrl-C during the countdown.
        """
        start_time = self.clock()
        self.console.print(message, markup=False, highlight=False)
        self.logger.info("timer started: %ds (%s)", duration, message)

        try:
            while True:
                elapsed = int(self.clock() - start_time)
                if elapsed >= duration:
                    self.console.print("Time's up!", highlight=False)
                    self.logger.info("timer finished: %ds", duration)
                    return True

                # Carriage return so the next tick overwrites this line.
                self.console.file.write(
                    f"Time remaining: {format_remaining(duration - elapsed)}\r"
                )
                self.console.file.flush()
                self.sleep(self.tick_seconds)
        except KeyboardInterrupt:
            self.console.print()
            self.console.print("[yellow]Session interrupted.[/yellow]")
            self.logger.warning(
                "timer interrupted after %ds of %ds",
                int(self.clock() - start_time),
                duration,
            )
            return False
