# tests/test_commands.py

from __future__ import annotations

from todolist.cli.commands import CommandRegistry, registry
from todolist.tasks.task_models import TaskFilter


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}
    notes: list[str] = []

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b", aliases=["bee"])

    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/BEE y", emit=notes.append) == "h3"
    assert called == {"h2": 1, "h3": 1}
    assert notes == ["note"]


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_help_lists_registered_commands(state) -> None:
    text = registry.handle(state, "/help") or ""
    for name in ("/filter", "/toggle", "/rm", "/undo", "/stats", "/list"):
        assert name in text


def test_filter_command(state, listener) -> None:
    assert "currently 'all'" in (registry.handle(state, "/filter") or "")

    assert registry.handle(state, "/filter done") == "Showing done tasks."
    assert state.store.current_filter is TaskFilter.DONE

    reply = registry.handle(state, "/filter later") or ""
    assert "Unknown filter" in reply
    assert state.store.current_filter is TaskFilter.DONE
    assert len(listener.changes) == 1


def test_toggle_uses_visible_row_numbers(state) -> None:
    a = state.store.add_task("Task A")
    b = state.store.add_task("Task B")
    assert a and b

    # Newest first: row 1 is Task B.
    assert registry.handle(state, "/toggle 1") == "'Task B' marked as done."
    assert state.store.get_task(b.id).is_completed is True  # type: ignore[union-attr]

    # Completed tasks sink to the bottom: row 2 is Task B again.
    assert registry.handle(state, "/t 2") == "'Task B' marked as active."


def test_row_errors_do_not_touch_store(state, listener) -> None:
    state.store.add_task("Only task")
    listener.changes.clear()

    assert "Usage" in (registry.handle(state, "/toggle") or "")
    assert "Not a row number" in (registry.handle(state, "/toggle abc") or "")
    assert "No task at row 2" in (registry.handle(state, "/rm 2") or "")
    assert "No task at row 0" in (registry.handle(state, "/rm 0") or "")
    assert listener.changes == []


def test_remove_and_undo_commands(state) -> None:
    task = state.store.add_task("Throw out trash")
    assert task is not None

    reply = registry.handle(state, "/rm 1") or ""
    assert "Task deleted" in reply and "/undo" in reply
    assert state.store.total_count == 0

    assert registry.handle(state, "/undo") == "Restored: 'Throw out trash'."
    assert state.store.get_task(task.id) == task
    assert registry.handle(state, "/undo") == "Nothing to undo."


def test_stats_and_list(state) -> None:
    assert "No tasks yet" in (registry.handle(state, "/list") or "")

    state.store.add_task("Task A")
    stats = registry.handle(state, "/stats") or ""
    assert "1 active, 0 done, 1 total" in stats
    assert "Filter: all" in stats

    listing = registry.handle(state, "/ls") or ""
    assert "1. [ ] Task A" in listing
