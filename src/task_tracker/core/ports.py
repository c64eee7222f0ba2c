# src/task_tracker/core/ports.py

"""
Ports (interfaces) used by the command layer.

Commands depend on these Protocols instead of the concrete file store,
which keeps the storage swappable and makes testing easier.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Protocol

from ..tasks.task_models import Task

Clock = Callable[[], str]
# Returns the current local time as an ISO-8601 string.


class TaskRepo(Protocol):
    """Whole-collection persistence: read everything, write everything."""

    def load(self) -> list[Task]: ...
    def save(self, tasks: Iterable[Task]) -> None: ...
