# src/todolist/connectors/console_connector.py

from __future__ import annotations

import logging
import time
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.task_api import empty_message, format_relative_time, submit_title, summary_line
from ..tasks.task_models import StoreChange

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def render_tasks(state: AppState, now: float | None = None) -> str:
    """Render the visible list with 1-based row numbers (used by /toggle N, /rm N)."""
    if now is None:
        now = time.time()

    store = state.store
    header = f"[{store.current_filter.value.upper()}] {summary_line(store)}"
    visible = store.visible_tasks()
    if not visible:
        return f"{header}\n  {empty_message(store.current_filter)}"

    lines = [header]
    for i, task in enumerate(visible, start=1):
        box = "[x]" if task.is_completed else "[ ]"
        lines.append(f"  {i}. {box} {task.title}  ({format_relative_time(task.created_at, now)})")
    return "\n".join(lines)


def run_console_loop(state: AppState) -> None:
    show_ts = bool(getattr(state.settings, "show_timestamps", True))

    def out(text: str) -> None:
        if show_ts:
            print(f"[{_ts_local()}] {text}", flush=True)
        else:
            print(text, flush=True)

    def on_change(change: StoreChange) -> None:
        logger.debug("Re-rendering after %s", change.kind.value)
        out(render_tasks(state))

    unsubscribe = state.store.subscribe(on_change)
    logger.info("Console connector started.")
    out("[CONSOLE] Type a task to add it. Use /help for commands. Use /exit to quit.")
    out(render_tasks(state))

    try:
        while True:
            try:
                user_input = input("> ").strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                print()
                break

            if user_input.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            try:
                reply = command_registry.handle(state, user_input, emit=out)
                if reply is None:
                    reply = submit_title(state, user_input)
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling input."

            out(reply)
    finally:
        unsubscribe()
        logger.info("Console connector finished.")
