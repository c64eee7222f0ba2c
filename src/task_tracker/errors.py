# src/task_tracker/errors.py

"""
Exception hierarchy for task-cli.

Everything the store or the command layer raises on purpose derives from
TaskTrackerError, so the CLI entrypoint can report it with a single except.
"""

from __future__ import annotations

from typing import Any


class TaskTrackerError(Exception):
    """Base exception for all task-cli errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ParseError(TaskTrackerError):
    """A persisted record could not be decoded."""

    def __init__(self, message: str, *, line: str | None = None, line_no: int | None = None) -> None:
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message, details={"line": line, "line_no": line_no})
        self.line = line
        self.line_no = line_no


class StoreIOError(TaskTrackerError):
    """Reading or writing the task file failed."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message, details={"path": path})
        self.path = path


class UsageError(TaskTrackerError):
    """Bad command-line arguments. The message is shown to the user as-is."""
