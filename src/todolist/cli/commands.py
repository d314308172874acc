# src/todolist/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.task_api import delete_with_undo, summary_line, undo_last_delete
from ..tasks.task_models import Task, TaskFilter

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /filter, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  Anything not starting with / is added as a new task.")
        return "\n".join(lines)


registry = CommandRegistry()


def _task_at_row(state: AppState, raw: str) -> Task:
    """
    Resolve a 1-based row number of the currently visible list.

    Raises ValueError with a user-facing message if it does not point at a task.
    """
    try:
        row = int(raw)
    except ValueError:
        raise ValueError(f"Not a row number: {raw!r}") from None

    visible = state.store.visible_tasks()
    if row < 1 or row > len(visible):
        raise ValueError(f"No task at row {row} (showing {len(visible)}).")
    return visible[row - 1]


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    # Imported lazily: the console connector imports this module.
    from ..connectors.console_connector import render_tasks

    return render_tasks(state)


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter                -> show current filter
    /filter all|active|done -> switch filter
    """
    if not args:
        return (
            f"Filter is currently '{state.store.current_filter.value}'. "
            "Use /filter all | active | done."
        )

    try:
        task_filter = TaskFilter.parse(args[0])
    except ValueError as e:
        return f"{e}. Use /filter all | active | done."

    state.store.set_filter(task_filter)
    return f"Showing {task_filter.value} tasks."


def cmd_toggle(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /toggle N (row number from the list)."
    try:
        task = _task_at_row(state, args[0])
    except ValueError as e:
        return str(e)

    updated = state.store.toggle_task(task.id)
    if updated is None:
        return "Task no longer exists."
    mark = "done" if updated.is_completed else "active"
    return f"'{updated.title}' marked as {mark}."


def cmd_remove(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /rm N (row number from the list)."
    try:
        task = _task_at_row(state, args[0])
    except ValueError as e:
        return str(e)

    removed = delete_with_undo(state, task.id)
    if removed is None:
        return "Task no longer exists."
    logger.debug("Delete requested via command id=%s", removed.id)
    return f"Task deleted: '{removed.title}'. Use /undo to restore it."


def cmd_undo(state: AppState, args: list[str]) -> str:
    if state.last_deleted is None:
        return "Nothing to undo."
    restored = undo_last_delete(state)
    if restored is None:
        return "Could not restore the task (it is already in the list)."
    return f"Restored: '{restored.title}'."


def cmd_stats(state: AppState, args: list[str]) -> str:
    return (
        f"Tasks: {summary_line(state.store)}\n"
        f"  Filter: {state.store.current_filter.value}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("filter", cmd_filter, help_text="Switch view: /filter all | active | done.")
registry.register(
    "toggle", cmd_toggle, help_text="Mark task at row N done/undone: /toggle N.", aliases=["t"]
)
registry.register(
    "rm", cmd_remove, help_text="Delete task at row N (undoable): /rm N.", aliases=["del"]
)
registry.register("undo", cmd_undo, help_text="Restore the last deleted task.")
registry.register("stats", cmd_stats, help_text="Show active/done/total counters.")
