"""Run command - task list plus Pomodoro sessions."""

from typing import Optional

import typer

from pomotask_cli.config import get_config_manager
from pomotask_cli.models import AppState
from pomotask_cli.models.focus.cycling import PomodoroConfig
from pomotask_cli.models.focus.timer import Timer
from pomotask_cli.services.session_driver import SessionDriver
from pomotask_cli.services.task_service import TaskService
from pomotask_cli.ui.prompts import ask_session_count, console_reader
from pomotask_cli.ui.task_manager import TaskManager
from pomotask_cli.utils.ui.console import get_console

from .decorators import command_wrapper


@command_wrapper
def run(
    sessions: Optional[int] = typer.Option(
        None,
        "--sessions",
        "-n",
        help="Number of Pomodoro sessions (asked interactively when omitted)",
    ),
    focus: Optional[int] = typer.Option(
        None, "--focus", min=0, help="Focus duration in seconds"
    ),
    break_: Optional[int] = typer.Option(
        None, "--break", min=0, help="Break duration in seconds"
    ),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Manage tasks, then run focus/break cycles with the task menu in between."""
    config = get_config_manager(profile).config
    console = get_console()
    read = console_reader(console)

    state = AppState.create(description_limit=config.tasks.description_limit)
    task_manager = TaskManager(
        TaskService(state),
        read=read,
        console=console,
        show_lists=config.ui.show_lists,
    )
    timer = Timer(console=console, tick_seconds=config.timer.tick_seconds)
    pomodoro = PomodoroConfig(
        focus_duration=focus if focus is not None else config.timer.focus_seconds,
        short_break=break_ if break_ is not None else config.timer.break_seconds,
    )

    try:
        task_manager.run()

        count = sessions if sessions is not None else ask_session_count(read, console)
        SessionDriver(task_manager, timer, pomodoro, console=console).run(count)
    finally:
        state.teardown()
