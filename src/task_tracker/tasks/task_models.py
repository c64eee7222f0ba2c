# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskStatus(StrEnum):
    """Task lifecycle status. Values are what gets written to the file."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @classmethod
    def parse(cls, raw: str) -> TaskStatus:
        """Case-insensitive lookup; raises ValueError for unknown values."""
        key = (raw or "").strip().lower()
        for status in cls:
            if status.value == key:
                return status
        raise ValueError(f"unknown status: {raw!r}")


@dataclass(slots=True)
class Task:
    id: int
    description: str
    status: TaskStatus
    # ISO-8601 local date-time strings, kept exactly as read from disk.
    created_at: str
    updated_at: str
