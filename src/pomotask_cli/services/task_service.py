"""Task service - Business logic for task operations.

This service sits between the interactive menu and the task containers,
moving tasks from the active store onto the completed stack.
"""

from __future__ import annotations

from enum import Enum

from pomotask_cli.models import AppState, TaskHandle, truncate_description
from pomotask_cli.utils.logger import get_logger


class CompleteOutcome(str, Enum):
    """Result of trying to complete a task."""

    COMPLETED = "completed"
    NOT_FOUND = "not_found"
    NO_TASKS = "no_tasks"


class TaskService:
    """Service for task business logic."""

    def __init__(self, state: AppState):
        """Initialize the task service.

        Args:
            state: Application state holding the task containers
        """
        self.state = state
        self.logger = get_logger()

    def add_task(self, description: str) -> TaskHandle:
        """Add a task to the head of the active store."""
        handle = self.state.tasks.add(description)
        self.logger.info(
            "task added: %r (handle %d)", self.state.arena.description(handle), handle
        )
        return handle

    def has_tasks(self) -> bool:
        return not self.state.tasks.is_empty

    def complete_task(self, description: str) -> CompleteOutcome:
        """Move the first task matching *description* onto the completed stack.

        The lookup text is clipped the same way stored descriptions are. Both
        containers are left unchanged unless the outcome is COMPLETED.
        """
        if self.state.tasks.is_empty:
            return CompleteOutcome.NO_TASKS

        description = truncate_description(
            description, self.state.arena.description_limit
        )
        handle = self.state.tasks.pop(description)
        if handle is None:
            self.logger.info("complete missed: %r", description)
            return CompleteOutcome.NOT_FOUND

        self.state.completed.push(handle)
        self.logger.info("task completed: %r (handle %d)", description, handle)
        return CompleteOutcome.COMPLETED

    def schedule_task(self, handle: TaskHandle) -> None:
        """Queue a task for a future Pomodoro session."""
        self.state.sessions.enqueue(handle)
        self.logger.info("task scheduled: handle %d", handle)

    def next_scheduled(self) -> TaskHandle | None:
        return self.state.sessions.dequeue()
