# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field

from todolist.tasks.task_models import ChangeKind, StoreChange


class FakeClock:
    """
    Deterministic clock for TaskStore.

    Each call returns the current value, then advances by `step` seconds,
    so consecutive adds get strictly increasing created_at values.
    """

    def __init__(self, start: float = 1_700_000_000.0, step: float = 1.0) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> float:
        value = self.now
        self.now += self.step
        return value


@dataclass(slots=True, eq=False)
class RecordingListener:
    """Change listener that records every notification it receives."""

    changes: list[StoreChange] = field(default_factory=list)

    def __call__(self, change: StoreChange) -> None:
        self.changes.append(change)

    @property
    def kinds(self) -> list[ChangeKind]:
        return [c.kind for c in self.changes]
