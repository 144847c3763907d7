"""Task records and the arena that owns them."""

from __future__ import annotations

from dataclasses import dataclass

DESCRIPTION_LIMIT = 99  # characters kept from a description

TaskHandle = int


@dataclass
class Task:
    """A user-described unit of work, identified by its description text."""

    handle: TaskHandle
    description: str


def truncate_description(description: str, limit: int = DESCRIPTION_LIMIT) -> str:
    """Drop any trailing newline and clip the description to *limit* characters."""
    return description.rstrip("\r\n")[:limit]


class TaskArena:
    """Owns every Task record, addressed by a stable integer handle.

    Containers never hold Task objects directly; they keep ordered
    sequences of handles, so moving a task between containers is a
    handle move and never a copy.
    """

    def __init__(self, description_limit: int = DESCRIPTION_LIMIT):
        self.description_limit = description_limit
        self._tasks: dict[TaskHandle, Task] = {}
        self._next_handle: TaskHandle = 1

    def create(self, description: str) -> TaskHandle:
        """Allocate a new task and return its handle."""
        handle = self._next_handle
        self._next_handle += 1
        self._tasks[handle] = Task(
            handle=handle,
            description=truncate_description(description, self.description_limit),
        )
        return handle

    def get(self, handle: TaskHandle) -> Task:
        """Return the task for *handle*.

        Raises:
            KeyError: if the handle was never allocated or was released
        """
        return self._tasks[handle]

    def description(self, handle: TaskHandle) -> str:
        return self._tasks[handle].description

    def release(self, handle: TaskHandle) -> None:
        """Forget a task record. Unknown handles are ignored."""
        self._tasks.pop(handle, None)

    def clear(self) -> None:
        self._tasks.clear()

    def __contains__(self, handle: object) -> bool:
        return handle in self._tasks

    def __len__(self) -> int:
        return len(self._tasks)
