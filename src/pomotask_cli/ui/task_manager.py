"""Interactive task menu run between Pomodoro sessions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rich.console import Console

from pomotask_cli.errors import InvalidChoiceError
from pomotask_cli.services.task_service import CompleteOutcome, TaskService
from pomotask_cli.ui.formatters import display_completed_tasks, display_tasks
from pomotask_cli.ui.prompts import LineReader, console_reader, parse_choice
from pomotask_cli.utils.logger import get_logger
from pomotask_cli.utils.ui.console import get_console

CHOICE_EXIT = 0
CHOICE_ADD = 1
CHOICE_COMPLETE = 2
CHOICES = (CHOICE_EXIT, CHOICE_ADD, CHOICE_COMPLETE)

MENU = (
    "Enter your choice\n"
    "1. Add new task\n"
    "2. Update completed task list\n"
    "0. No changes to be made\n"
)


class MenuState(str, Enum):
    AWAITING_CHOICE = "awaiting_choice"
    EXIT = "exit"


@dataclass
class TaskManagerResult:
    """What happened during one menu invocation."""

    added: int = 0
    completed: int = 0
    not_found: int = 0
    invalid: int = 0


class TaskManager:
    """Menu loop that adds and completes tasks until the user picks 0."""

    def __init__(
        self,
        service: TaskService,
        read: LineReader | None = None,
        console: Console | None = None,
        show_lists: bool = True,
    ):
        self.service = service
        self.console = console if console is not None else get_console()
        self.read = read if read is not None else console_reader(self.console)
        self.show_lists = show_lists
        self.state = MenuState.AWAITING_CHOICE
        self.logger = get_logger()

    def run(self) -> TaskManagerResult:
        """Run the menu until the user exits or input runs out."""
        result = TaskManagerResult()
        self.state = MenuState.AWAITING_CHOICE

        while self.state is MenuState.AWAITING_CHOICE:
            if self.show_lists:
                display_tasks(self.service.state.tasks, self.console)
                display_completed_tasks(self.service.state.completed, self.console)
                self.console.print()

            self.console.print(MENU, markup=False, highlight=False)
            try:
                raw = self.read("Enter your choice: ")
            except EOFError:
                self.console.print()
                self.state = MenuState.EXIT
                break

            try:
                choice = parse_choice(raw, CHOICES)
            except InvalidChoiceError:
                result.invalid += 1
                self.console.print("[yellow]Invalid choice.[/yellow]")
                continue

            if choice == CHOICE_EXIT:
                self.state = MenuState.EXIT
            elif choice == CHOICE_ADD:
                self._add(result)
            elif choice == CHOICE_COMPLETE:
                self._complete(result)

        self.logger.debug("task manager finished: %s", result)
        return result

    def _read_description(self) -> str | None:
        """Read a description, skipping leading whitespace and blank lines.

        Returns None if input runs out before a non-blank line arrives.
        """
        prompt = "Enter task description: "
        while True:
            try:
                line = self.read(prompt).lstrip()
            except EOFError:
                self.console.print()
                return None
            if line:
                return line
            # Keep waiting on the same prompt line.
            prompt = ""

    def _add(self, result: TaskManagerResult) -> None:
        description = self._read_description()
        if description is None:
            return
        self.service.add_task(description)
        result.added += 1

    def _complete(self, result: TaskManagerResult) -> None:
        if not self.service.has_tasks():
            self.console.print("No tasks to complete.")
            return

        description = self._read_description()
        if description is None:
            return

        outcome = self.service.complete_task(description)
        if outcome is CompleteOutcome.COMPLETED:
            result.completed += 1
        else:
            result.not_found += 1
            self.console.print("Task with given description not found.")
