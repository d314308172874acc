# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from todolist.core.state import AppState
from todolist.tasks.task_models import TaskFilter
from todolist.tasks.task_store import TaskStore

from .fakes import FakeClock, RecordingListener


@pytest.fixture()
def settings(tmp_path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the console connector.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="todolist-test",
        log_level="DEBUG",
        log_to_file=False,
        show_timestamps=False,
        initial_filter=TaskFilter.ALL,
        data_dir=tmp_path,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock: FakeClock) -> TaskStore:
    return TaskStore(clock=clock)


@pytest.fixture()
def listener(store: TaskStore) -> RecordingListener:
    rec = RecordingListener()
    store.subscribe(rec)
    return rec


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, store=store)
