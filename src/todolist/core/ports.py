# src/todolist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the front ends.

Connectors and commands depend on these Protocols instead of the concrete TaskStore.
This keeps the store swappable and makes testing easier.
"""

from collections.abc import Callable
from typing import Protocol

from ..tasks.task_models import StoreChange, Task, TaskFilter


class ChangeListener(Protocol):
    """Called synchronously after every successful store mutation."""

    def __call__(self, change: StoreChange) -> None: ...


class TaskRepo(Protocol):
    # Reads
    @property
    def tasks(self) -> tuple[Task, ...]: ...
    @property
    def current_filter(self) -> TaskFilter: ...
    @property
    def total_count(self) -> int: ...
    @property
    def active_count(self) -> int: ...
    @property
    def completed_count(self) -> int: ...

    def get_task(self, task_id: str) -> Task | None: ...
    def visible_tasks(self) -> list[Task]: ...

    # Writes
    def add_task(self, raw_title: str) -> Task | None: ...
    def remove_task(self, task_id: str) -> Task | None: ...
    def restore_task(self, task: Task) -> bool: ...
    def toggle_task(self, task_id: str) -> Task | None: ...
    def set_filter(self, task_filter: TaskFilter) -> None: ...

    # Change notification
    def subscribe(self, listener: ChangeListener) -> Callable[[], None]: ...
    def unsubscribe(self, listener: ChangeListener) -> None: ...
