"""Task containers: the active task store, completed stack and session queue.

Each container holds task handles from a shared TaskArena. A handle is
held by at most one of the task store and the completed stack at a time.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from .task import TaskArena, TaskHandle


class TaskStore:
    """Active (not yet completed) tasks, newest first."""

    def __init__(self, arena: TaskArena):
        self.arena = arena
        # Index 0 is the head of the list.
        self._handles: deque[TaskHandle] = deque()

    def add(self, description: str) -> TaskHandle:
        """Create a task and insert it at the head. Duplicates are allowed."""
        handle = self.arena.create(description)
        self._handles.appendleft(handle)
        return handle

    def pop(self, description: str) -> TaskHandle | None:
        """Unlink the first task whose description matches exactly.

        Matching is case-sensitive and scans head to tail. Returns None
        when the store is empty or nothing matches; the store is left
        untouched in that case.
        """
        for index, handle in enumerate(self._handles):
            if self.arena.description(handle) == description:
                del self._handles[index]
                return handle
        return None

    def handles(self) -> list[TaskHandle]:
        return list(self._handles)

    def descriptions(self) -> list[str]:
        return [self.arena.description(h) for h in self._handles]

    @property
    def is_empty(self) -> bool:
        return not self._handles

    def clear(self) -> None:
        """Release every task held by the store."""
        for handle in self._handles:
            self.arena.release(handle)
        self._handles.clear()

    def __iter__(self) -> Iterator[TaskHandle]:
        return iter(list(self._handles))

    def __len__(self) -> int:
        return len(self._handles)


class CompletedStack:
    """LIFO history of completed tasks; the top is the latest completion."""

    def __init__(self, arena: TaskArena):
        self.arena = arena
        # The end of the list is the top of the stack.
        self._handles: list[TaskHandle] = []

    def push(self, handle: TaskHandle) -> None:
        self._handles.append(handle)

    def pop(self) -> TaskHandle | None:
        """Remove and return the top handle, or None when empty."""
        if not self._handles:
            return None
        return self._handles.pop()

    def peek(self) -> TaskHandle | None:
        return self._handles[-1] if self._handles else None

    def handles(self) -> list[TaskHandle]:
        """Handles from top to bottom."""
        return list(reversed(self._handles))

    def descriptions(self) -> list[str]:
        return [self.arena.description(h) for h in self.handles()]

    @property
    def is_empty(self) -> bool:
        return not self._handles

    def clear(self) -> None:
        for handle in self._handles:
            self.arena.release(handle)
        self._handles.clear()

    def __iter__(self) -> Iterator[TaskHandle]:
        return iter(self.handles())

    def __len__(self) -> int:
        return len(self._handles)


class SessionQueue:
    """FIFO of tasks scheduled for Pomodoro sessions.

    Exposed for scheduling but not driven by the interactive flow.
    """

    def __init__(self, arena: TaskArena):
        self.arena = arena
        self._handles: deque[TaskHandle] = deque()

    def enqueue(self, handle: TaskHandle) -> None:
        self._handles.append(handle)

    def dequeue(self) -> TaskHandle | None:
        """Remove and return the front handle, or None when empty."""
        if not self._handles:
            return None
        return self._handles.popleft()

    @property
    def front(self) -> TaskHandle | None:
        return self._handles[0] if self._handles else None

    @property
    def rear(self) -> TaskHandle | None:
        return self._handles[-1] if self._handles else None

    def handles(self) -> list[TaskHandle]:
        """Handles from front to rear."""
        return list(self._handles)

    def descriptions(self) -> list[str]:
        return [self.arena.description(h) for h in self._handles]

    @property
    def is_empty(self) -> bool:
        return not self._handles

    def clear(self) -> None:
        # Queued handles are shared with other containers, so nothing is released.
        self._handles.clear()

    def __iter__(self) -> Iterator[TaskHandle]:
        return iter(list(self._handles))

    def __len__(self) -> int:
        return len(self._handles)
