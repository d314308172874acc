# src/todolist/tasks/task_store.py

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import replace

from ..core.ports import ChangeListener
from .task_models import ChangeKind, StoreChange, Task, TaskFilter

logger = logging.getLogger(__name__)

MIN_TITLE_LENGTH = 3


class TaskStore:
    """
    In-memory task store.

    Owns the task list (insertion order = storage order) and the current filter.
    Display order is computed on every read by visible_tasks().

    Write rules:
    - invalid input / unknown ids are silent no-ops (nothing changes, nobody is notified)
    - every successful write notifies all listeners exactly once, after the change is applied

    Not thread-safe: meant to be driven from a single UI thread.
    """

    def __init__(
        self,
        *,
        initial_filter: TaskFilter = TaskFilter.ALL,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._tasks: list[Task] = []
        self._filter = initial_filter
        self._clock = clock
        self._listeners: list[ChangeListener] = []
        self._last_id_ns = 0
        logger.debug("TaskStore ready filter=%s", self._filter.value)

    # ---- observers ----

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a change listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, kind: ChangeKind, task_id: str | None = None) -> None:
        change = StoreChange(kind=kind, task_id=task_id)
        # Snapshot: listeners may unsubscribe while being notified.
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception:
                logger.exception("Change listener failed kind=%s task_id=%s", kind.value, task_id)

    # ---- low-level helpers ----

    def _next_id(self, created_at: float) -> str:
        ns = max(int(created_at * 1_000_000_000), self._last_id_ns + 1)
        self._last_id_ns = ns
        return str(ns)

    def _index_of(self, task_id: str) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    # ---- reads ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def current_filter(self) -> TaskFilter:
        return self._filter

    @property
    def total_count(self) -> int:
        return len(self._tasks)

    @property
    def active_count(self) -> int:
        return sum(1 for t in self._tasks if not t.is_completed)

    @property
    def completed_count(self) -> int:
        return sum(1 for t in self._tasks if t.is_completed)

    def get_task(self, task_id: str) -> Task | None:
        idx = self._index_of(task_id)
        return self._tasks[idx] if idx is not None else None

    def visible_tasks(self) -> list[Task]:
        """
        Tasks selected by the current filter, in display order.

        - ALL: incomplete first, then complete; newest first within each group
        - ACTIVE / DONE: newest first

        sorted() is stable, so equal timestamps keep insertion order.
        """
        if self._filter is TaskFilter.ACTIVE:
            selected = [t for t in self._tasks if not t.is_completed]
        elif self._filter is TaskFilter.DONE:
            selected = [t for t in self._tasks if t.is_completed]
        else:
            return sorted(self._tasks, key=lambda t: (t.is_completed, -t.created_at))
        return sorted(selected, key=lambda t: -t.created_at)

    # ---- writes ----

    def add_task(self, raw_title: str) -> Task | None:
        """
        Create a task from raw user input.

        Returns the new task, or None when the trimmed title is shorter than
        MIN_TITLE_LENGTH (nothing is stored and nobody is notified).
        """
        title = (raw_title or "").strip()
        if len(title) < MIN_TITLE_LENGTH:
            logger.debug("Task rejected: title too short (len=%d)", len(title))
            return None

        created_at = float(self._clock())
        task = Task(id=self._next_id(created_at), title=title, created_at=created_at)
        self._tasks.append(task)
        logger.debug("Task added id=%s total=%d", task.id, len(self._tasks))
        self._notify(ChangeKind.ADDED, task.id)
        return task

    def remove_task(self, task_id: str) -> Task | None:
        """Remove a task and hand it back so the caller can keep it for undo."""
        idx = self._index_of(task_id)
        if idx is None:
            return None
        task = self._tasks.pop(idx)
        logger.debug("Task removed id=%s total=%d", task_id, len(self._tasks))
        self._notify(ChangeKind.REMOVED, task_id)
        return task

    def restore_task(self, task: Task) -> bool:
        """
        Re-insert a previously removed task as-is (id, title, created_at, is_completed).

        Refuses a task whose id is still present, to keep ids unique.
        """
        if self._index_of(task.id) is not None:
            logger.warning("Restore refused: task id=%s is already present", task.id)
            return False
        self._tasks.append(task)
        logger.debug("Task restored id=%s total=%d", task.id, len(self._tasks))
        self._notify(ChangeKind.RESTORED, task.id)
        return True

    def toggle_task(self, task_id: str) -> Task | None:
        idx = self._index_of(task_id)
        if idx is None:
            return None
        task = replace(self._tasks[idx], is_completed=not self._tasks[idx].is_completed)
        self._tasks[idx] = task
        logger.debug("Task toggled id=%s completed=%s", task_id, task.is_completed)
        self._notify(ChangeKind.TOGGLED, task_id)
        return task

    def set_filter(self, task_filter: TaskFilter) -> None:
        self._filter = task_filter
        logger.debug("Filter set to %s", task_filter.value)
        self._notify(ChangeKind.FILTER_CHANGED)
