"""Application state shared by the task manager and the session driver."""

from __future__ import annotations

from dataclasses import dataclass, field

from .containers import CompletedStack, SessionQueue, TaskStore
from .task import DESCRIPTION_LIMIT, TaskArena


@dataclass
class AppState:
    """Owns the task arena and the three task containers."""

    arena: TaskArena
    tasks: TaskStore = field(init=False)
    completed: CompletedStack = field(init=False)
    sessions: SessionQueue = field(init=False)

    def __post_init__(self) -> None:
        self.tasks = TaskStore(self.arena)
        self.completed = CompletedStack(self.arena)
        self.sessions = SessionQueue(self.arena)

    @classmethod
    def create(cls, description_limit: int = DESCRIPTION_LIMIT) -> "AppState":
        return cls(arena=TaskArena(description_limit=description_limit))

    def teardown(self) -> None:
        """Drop every container's contents and release all task records."""
        self.sessions.clear()
        self.tasks.clear()
        self.completed.clear()
        self.arena.clear()
