# src/todolist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskFilter(StrEnum):
    """Display scope for the task list. Does not affect storage."""

    ALL = "all"
    ACTIVE = "active"
    DONE = "done"

    @classmethod
    def parse(cls, raw: str | None) -> TaskFilter:
        """
        Parse user input into a filter.

        Accepts the value names (case-insensitive) and a few aliases:
        - "completed" -> DONE
        - "open", "todo" -> ACTIVE
        """
        key = (raw or "").strip().lower()
        aliases = {"completed": cls.DONE, "open": cls.ACTIVE, "todo": cls.ACTIVE}
        if key in aliases:
            return aliases[key]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown filter: {raw!r}") from None


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    created_at: float
    is_completed: bool = False


class ChangeKind(StrEnum):
    ADDED = "added"
    REMOVED = "removed"
    RESTORED = "restored"
    TOGGLED = "toggled"
    FILTER_CHANGED = "filter_changed"


@dataclass(frozen=True, slots=True)
class StoreChange:
    """What just happened in the store (delivered to listeners after the fact)."""

    kind: ChangeKind
    task_id: str | None = None
