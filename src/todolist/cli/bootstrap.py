# src/todolist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it builds the one TaskStore for the
process and hands it to AppState. Nothing else constructs a store.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_models import TaskFilter
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    initial_filter = getattr(settings, "initial_filter", TaskFilter.ALL)
    store = TaskStore(initial_filter=initial_filter)
    logger.info("State ready (filter=%s).", store.current_filter.value)
    return AppState(settings=settings, store=store)
