# src/todolist/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_models import Task
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings live on the state so commands/connectors don't re-read config.
    settings: object
    store: TaskRepo

    # Last value handed back by a delete, kept until /undo or the next delete.
    last_deleted: Task | None = None
