# src/todolist/tasks/task_api.py

from __future__ import annotations

import logging
import time

from ..core.ports import TaskRepo
from ..core.state import AppState
from .task_models import Task, TaskFilter
from .task_store import MIN_TITLE_LENGTH

logger = logging.getLogger(__name__)

MSG_EMPTY_TITLE = "Please enter a task"
MSG_SHORT_TITLE = f"Task must be at least {MIN_TITLE_LENGTH} characters"
MSG_TASK_ADDED = "Task added"

_EMPTY_MESSAGES = {
    TaskFilter.ALL: "No tasks yet. Add one above!",
    TaskFilter.ACTIVE: "No active tasks",
    TaskFilter.DONE: "No completed tasks",
}


def validate_title(raw: str | None) -> str | None:
    """
    Front-end validation: return a user-facing error message, or None if the input is fine.

    The store enforces the length rule on its own; this only exists to tell the user why.
    """
    title = (raw or "").strip()
    if not title:
        return MSG_EMPTY_TITLE
    if len(title) < MIN_TITLE_LENGTH:
        return MSG_SHORT_TITLE
    return None


def submit_title(state: AppState, raw: str | None) -> str:
    """Validate user input and add it as a task. Returns the message to show."""
    error = validate_title(raw)
    if error is not None:
        return error

    task = state.store.add_task(raw or "")
    if task is None:
        # Store guard disagreed with the front-end check.
        logger.warning("Store rejected a title that passed validation.")
        return MSG_SHORT_TITLE
    return MSG_TASK_ADDED


def delete_with_undo(state: AppState, task_id: str) -> Task | None:
    """Remove a task and remember it so undo_last_delete() can bring it back."""
    removed = state.store.remove_task(task_id)
    if removed is not None:
        state.last_deleted = removed
    return removed


def undo_last_delete(state: AppState) -> Task | None:
    task = state.last_deleted
    if task is None:
        return None

    state.last_deleted = None
    if not state.store.restore_task(task):
        return None
    logger.info("Undo restored task id=%s", task.id)
    return task


def format_relative_time(created_at: float, now: float | None = None) -> str:
    if now is None:
        now = time.time()

    seconds = int(now - created_at)
    if seconds < 60:
        return "just now"
    if seconds < 3600:
        return f"{seconds // 60} min ago"
    if seconds < 86400:
        return f"{seconds // 3600} h ago"
    return f"{seconds // 86400} d ago"


def empty_message(task_filter: TaskFilter) -> str:
    return _EMPTY_MESSAGES[task_filter]


def summary_line(store: TaskRepo) -> str:
    return (
        f"{store.active_count} active, {store.completed_count} done, "
        f"{store.total_count} total"
    )
