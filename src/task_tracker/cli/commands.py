# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from ..core.state import AppState
from ..errors import UsageError
from ..tasks import task_api
from ..tasks.task_codec import encode_task
from ..tasks.task_models import TaskStatus

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

PROG = "task-cli"

# ASCII digits with an optional leading minus.
_ID_ARG_RE = re.compile(r"-?[0-9]+")


class CommandRegistry:
    """Maps `task-cli <command>` names to handlers and builds the usage text."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, tuple[str, str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        synopsis: str = "",
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = (synopsis, help_text)
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, argv: list[str]) -> str:
        """
        Run `argv` (command name first) and return the text to print.

        UsageError becomes its message; store errors propagate to the caller.
        """
        if not argv:
            return self.build_help()

        name = argv[0].lower()
        args = argv[1:]

        handler = self._handlers.get(name)
        if not handler:
            logger.debug("Unknown command: %s", argv[0])
            return "Invalid Command.\n" + self.build_help()

        try:
            return handler(state, args)
        except UsageError as e:
            logger.debug("Usage error in %s: %s", name, e)
            return e.message

    def build_help(self) -> str:
        entries = [(f"{name} {synopsis}".rstrip(), text) for name, (synopsis, text) in self._help.items()]
        width = max((len(left) for left, _ in entries), default=0)
        lines = [f"Usage: {PROG} <command> [arguments]", "Commands:"]
        for left, text in entries:
            lines.append(f"  {left.ljust(width)}  - {text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(raw: str) -> int:
    if not _ID_ARG_RE.fullmatch(raw):
        raise UsageError(f"Error: Invalid task ID: {raw}")
    return int(raw)


def _join_description(words: list[str], usage: str) -> str:
    description = " ".join(words).strip()
    if not description:
        raise UsageError(usage)
    return description


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    usage = f'Usage: {PROG} add "<task description>"'
    if not args:
        raise UsageError(usage)
    description = _join_description(args, usage)

    tasks = state.task_store.load()
    task = task_api.add_task(tasks, description, now=state.clock())
    state.task_store.save(tasks)
    return f"Task added successfully (ID: {task.id})"


def cmd_update(state: AppState, args: list[str]) -> str:
    usage = f'Usage: {PROG} update <task-id> "<new description>"'
    if len(args) < 2:
        raise UsageError(usage)
    task_id = _parse_id(args[0])
    description = _join_description(args[1:], usage)

    tasks = state.task_store.load()
    if task_api.update_description(tasks, task_id, description, now=state.clock()) is None:
        return f"Task not found (ID: {task_id})"
    state.task_store.save(tasks)
    return f"Task updated successfully (ID: {task_id})"


def cmd_delete(state: AppState, args: list[str]) -> str:
    if not args:
        raise UsageError(f"Usage: {PROG} delete <task-id>")
    task_id = _parse_id(args[0])

    # A missing id is not reported; the file is rewritten either way.
    tasks = state.task_store.load()
    task_api.delete_tasks(tasks, task_id)
    state.task_store.save(tasks)
    return f"Task deleted successfully (ID: {task_id})"


def _mark(state: AppState, args: list[str], status: TaskStatus) -> str:
    if not args:
        raise UsageError(f"Usage: {PROG} mark-{status.value} <task-id>")
    task_id = _parse_id(args[0])

    tasks = state.task_store.load()
    if task_api.set_status(tasks, task_id, status, now=state.clock()) is None:
        return f"Task not found (ID: {task_id})"
    state.task_store.save(tasks)
    return f"Task marked as {status.value} (ID: {task_id})"


def cmd_mark_in_progress(state: AppState, args: list[str]) -> str:
    return _mark(state, args, TaskStatus.IN_PROGRESS)


def cmd_mark_done(state: AppState, args: list[str]) -> str:
    return _mark(state, args, TaskStatus.DONE)


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    list          -> every task in store order
    list <status> -> only tasks with that status (case-insensitive)
    """
    status = args[0] if args else None
    tasks = task_api.filter_by_status(state.task_store.load(), status)
    return "\n".join(encode_task(t) for t in tasks)


registry.register("add", cmd_add, help_text="Add a new task", synopsis="<description>")
registry.register(
    "update", cmd_update, help_text="Update a task", synopsis="<id> <description>"
)
registry.register("delete", cmd_delete, help_text="Delete a task", synopsis="<id>")
registry.register(
    "mark-in-progress",
    cmd_mark_in_progress,
    help_text="Mark a task as in-progress",
    synopsis="<id>",
)
registry.register("mark-done", cmd_mark_done, help_text="Mark a task as done", synopsis="<id>")
registry.register(
    "list",
    cmd_list,
    help_text="List tasks (optional: done, todo, in-progress)",
    synopsis="[status]",
)
registry.register("help", cmd_help, help_text="Show this help", aliases=["-h", "--help"])
