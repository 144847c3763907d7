"""Domain models for PomoTask CLI."""

from .containers import CompletedStack, SessionQueue, TaskStore
from .state import AppState
from .task import DESCRIPTION_LIMIT, Task, TaskArena, TaskHandle, truncate_description

__all__ = [
    "DESCRIPTION_LIMIT",
    "AppState",
    "CompletedStack",
    "SessionQueue",
    "Task",
    "TaskArena",
    "TaskHandle",
    "TaskStore",
    "truncate_description",
]
