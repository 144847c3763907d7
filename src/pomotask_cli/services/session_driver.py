"""Runs a series of Pomodoro cycles with task management in between."""

from __future__ import annotations

from rich.console import Console

from pomotask_cli.models.focus.cycling import (
    BREAK_ANNOUNCEMENT,
    BREAK_MESSAGE,
    FOCUS_MESSAGE,
    CycleState,
    PomodoroConfig,
)
from pomotask_cli.models.focus.timer import Timer
from pomotask_cli.ui.task_manager import TaskManager
from pomotask_cli.utils.logger import get_logger
from pomotask_cli.utils.ui.console import get_console

FAREWELL = "Thank you for using the Pomodoro Timer!"


class SessionDriver:
    """Alternates focus and break timers, reopening the task menu after each break.

    A count of zero or less runs no sessions. If a timer is interrupted the
    remaining sessions are skipped; the farewell is printed either way.
    """

    def __init__(
        self,
        task_manager: TaskManager,
        timer: Timer,
        config: PomodoroConfig | None = None,
        console: Console | None = None,
    ):
        self.task_manager = task_manager
        self.timer = timer
        self.config = config or PomodoroConfig()
        self.console = console if console is not None else get_console()
        self.logger = get_logger()

    def run(self, count: int) -> CycleState:
        cycle = CycleState(sessions_planned=max(0, count))
        self.logger.info("running %d pomodoro session(s)", cycle.sessions_planned)

        while not cycle.finished:
            if not self.timer.start(cycle.get_duration(self.config), FOCUS_MESSAGE):
                cycle.interrupted = True
                break
            cycle.advance()

            self.console.print(f"\n{BREAK_ANNOUNCEMENT}", highlight=False)
            if not self.timer.start(cycle.get_duration(self.config), BREAK_MESSAGE):
                cycle.interrupted = True
                break
            self.console.print()

            self.task_manager.run()
            cycle.advance()
            self.logger.info(
                "session %d of %d done", cycle.sessions_completed, cycle.sessions_planned
            )

        self.console.print(f"\n{FAREWELL}", highlight=False)
        return cycle
