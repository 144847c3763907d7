"""Unit tests for the task arena and the three task containers."""

from __future__ import annotations

import pytest

from pomotask_cli.models import (
    DESCRIPTION_LIMIT,
    AppState,
    CompletedStack,
    SessionQueue,
    TaskArena,
    TaskStore,
    truncate_description,
)


@pytest.fixture()
def arena() -> TaskArena:
    return TaskArena()


# ---------------------------------------------------------------------------
# TaskArena
# ---------------------------------------------------------------------------


class TestTaskArena:
    def test_create_returns_distinct_handles(self, arena):
        first = arena.create("A")
        second = arena.create("A")

        assert first != second
        assert arena.description(first) == "A"
        assert arena.description(second) == "A"
        assert len(arena) == 2

    def test_long_description_is_truncated(self, arena):
        handle = arena.create("x" * 150)

        assert len(arena.description(handle)) == DESCRIPTION_LIMIT

    def test_trailing_newline_is_not_stored(self, arena):
        handle = arena.create("Write report\n")

        assert arena.description(handle) == "Write report"

    def test_embedded_spaces_are_kept(self, arena):
        handle = arena.create("  review the   PR ")

        assert arena.description(handle) == "  review the   PR "

    def test_custom_limit(self):
        arena = TaskArena(description_limit=5)

        assert arena.description(arena.create("abcdefgh")) == "abcde"

    def test_release_forgets_record(self, arena):
        handle = arena.create("A")
        arena.release(handle)

        assert handle not in arena
        with pytest.raises(KeyError):
            arena.get(handle)

    def test_release_unknown_handle_is_ignored(self, arena):
        arena.release(42)
        assert len(arena) == 0

    def test_truncate_description_helper(self):
        assert truncate_description("abc\r\n", limit=2) == "ab"


# ---------------------------------------------------------------------------
# TaskStore
# ---------------------------------------------------------------------------


class TestTaskStore:
    def test_new_tasks_go_to_head(self, arena):
        store = TaskStore(arena)
        store.add("A")
        store.add("B")

        assert store.descriptions() == ["B", "A"]

    def test_duplicates_coexist(self, arena):
        store = TaskStore(arena)
        store.add("A")
        store.add("A")

        assert store.descriptions() == ["A", "A"]
        assert len(store) == 2

    def test_pop_empty_store_returns_none(self, arena):
        store = TaskStore(arena)

        assert store.pop("A") is None
        assert store.is_empty

    def test_pop_missing_returns_none_and_keeps_order(self, arena):
        store = TaskStore(arena)
        store.add("A")
        store.add("B")

        assert store.pop("C") is None
        assert store.descriptions() == ["B", "A"]

    def test_pop_is_case_sensitive(self, arena):
        store = TaskStore(arena)
        store.add("Write report")

        assert store.pop("write report") is None
        assert len(store) == 1

    def test_pop_middle_preserves_remaining_order(self, arena):
        store = TaskStore(arena)
        for name in ("A", "B", "C"):
            store.add(name)

        handle = store.pop("B")

        assert arena.description(handle) == "B"
        assert store.descriptions() == ["C", "A"]

    def test_pop_takes_first_match_from_head(self, arena):
        store = TaskStore(arena)
        older = store.add("A")
        newer = store.add("A")

        assert store.pop("A") == newer
        assert store.handles() == [older]

    def test_clear_releases_tasks(self, arena):
        store = TaskStore(arena)
        store.add("A")
        store.clear()

        assert store.is_empty
        assert len(arena) == 0


# ---------------------------------------------------------------------------
# CompletedStack
# ---------------------------------------------------------------------------


class TestCompletedStack:
    def test_push_pop_is_lifo(self, arena):
        stack = CompletedStack(arena)
        a, b = arena.create("A"), arena.create("B")
        stack.push(a)
        stack.push(b)

        assert stack.descriptions() == ["B", "A"]
        assert stack.peek() == b
        assert stack.pop() == b
        assert stack.pop() == a
        assert stack.pop() is None

    def test_empty_stack(self, arena):
        stack = CompletedStack(arena)

        assert stack.is_empty
        assert stack.peek() is None
        assert list(stack) == []


# ---------------------------------------------------------------------------
# SessionQueue
# ---------------------------------------------------------------------------


class TestSessionQueue:
    def test_enqueue_dequeue_is_fifo(self, arena):
        queue = SessionQueue(arena)
        x, y = arena.create("X"), arena.create("Y")
        queue.enqueue(x)
        queue.enqueue(y)

        assert queue.descriptions() == ["X", "Y"]
        assert queue.dequeue() == x
        assert queue.dequeue() == y
        assert queue.dequeue() is None

    def test_first_enqueue_sets_front_and_rear(self, arena):
        queue = SessionQueue(arena)
        x = arena.create("X")
        queue.enqueue(x)

        assert queue.front == x
        assert queue.rear == x

    def test_rear_resets_when_last_element_leaves(self, arena):
        queue = SessionQueue(arena)
        queue.enqueue(arena.create("X"))
        queue.dequeue()

        assert queue.front is None
        assert queue.rear is None
        assert queue.is_empty


# ---------------------------------------------------------------------------
# AppState
# ---------------------------------------------------------------------------


class TestAppState:
    def test_containers_share_arena(self):
        state = AppState.create()

        assert state.tasks.arena is state.arena
        assert state.completed.arena is state.arena
        assert state.sessions.arena is state.arena

    def test_create_uses_description_limit(self):
        state = AppState.create(description_limit=3)
        state.tasks.add("abcdef")

        assert state.tasks.descriptions() == ["abc"]

    def test_teardown_releases_everything(self):
        state = AppState.create()
        state.tasks.add("A")
        state.tasks.add("B")
        state.completed.push(state.tasks.pop("B"))
        state.sessions.enqueue(state.tasks.handles()[0])

        state.teardown()

        assert len(state.arena) == 0
        assert state.tasks.is_empty
        assert state.completed.is_empty
        assert state.sessions.is_empty
