# src/task_tracker/tasks/task_api.py

"""
In-memory operations over a loaded task list.

None of these touch the file; callers load, mutate, then save.
"""

from __future__ import annotations

import logging
from datetime import datetime

from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)


def now_iso() -> str:
    """Current local time as an ISO-8601 date-time string."""
    return datetime.now().isoformat()


def next_task_id(tasks: list[Task]) -> int:
    if not tasks:
        return 1
    return max(t.id for t in tasks) + 1


def add_task(tasks: list[Task], description: str, *, now: str) -> Task:
    task = Task(
        id=next_task_id(tasks),
        description=description,
        status=TaskStatus.TODO,
        created_at=now,
        updated_at=now,
    )
    tasks.append(task)
    logger.info("Task added id=%s", task.id)
    return task


def find_task(tasks: list[Task], task_id: int) -> Task | None:
    for task in tasks:
        if task.id == task_id:
            return task
    return None


def update_description(tasks: list[Task], task_id: int, description: str, *, now: str) -> Task | None:
    task = find_task(tasks, task_id)
    if task is None:
        return None
    task.description = description
    task.updated_at = now
    logger.info("Task updated id=%s", task_id)
    return task


def set_status(tasks: list[Task], task_id: int, status: TaskStatus, *, now: str) -> Task | None:
    task = find_task(tasks, task_id)
    if task is None:
        return None
    task.status = status
    task.updated_at = now
    logger.info("Task status id=%s status=%s", task_id, status.value)
    return task


def delete_tasks(tasks: list[Task], task_id: int) -> int:
    """Remove every task with this id, in place. Returns how many were removed."""
    before = len(tasks)
    tasks[:] = [t for t in tasks if t.id != task_id]
    removed = before - len(tasks)
    logger.info("Task delete id=%s removed=%d", task_id, removed)
    return removed


def filter_by_status(tasks: list[Task], status: str | None = None) -> list[Task]:
    if status is None:
        return list(tasks)
    wanted = status.strip().lower()
    return [t for t in tasks if t.status.value.lower() == wanted]
