# tests/test_task_api.py

from __future__ import annotations

from task_tracker.tasks import task_api
from task_tracker.tasks.task_models import Task, TaskStatus


def _t(task_id: int, status: TaskStatus = TaskStatus.TODO) -> Task:
    return Task(task_id, f"task {task_id}", status, "c", "u")


def test_ids_start_at_one_and_increase() -> None:
    tasks: list[Task] = []
    first = task_api.add_task(tasks, "first", now="t0")
    second = task_api.add_task(tasks, "second", now="t1")

    assert (first.id, second.id) == (1, 2)
    assert first.status is TaskStatus.TODO
    assert first.created_at == first.updated_at == "t0"
    assert [t.description for t in tasks] == ["first", "second"]


def test_next_id_follows_highest_existing_id() -> None:
    assert task_api.next_task_id([_t(4), _t(2)]) == 5
    assert task_api.next_task_id([]) == 1


def test_update_and_status_touch_only_the_target() -> None:
    tasks = [_t(1), _t(2)]

    updated = task_api.update_description(tasks, 2, "renamed", now="t9")
    assert updated is tasks[1]
    assert tasks[1].description == "renamed"
    assert tasks[1].updated_at == "t9"
    assert tasks[1].created_at == "c"
    assert tasks[0] == _t(1)

    marked = task_api.set_status(tasks, 1, TaskStatus.DONE, now="t10")
    assert marked is tasks[0]
    assert tasks[0].status is TaskStatus.DONE
    assert tasks[0].updated_at == "t10"


def test_missing_id_returns_none_and_changes_nothing() -> None:
    tasks = [_t(1)]
    assert task_api.update_description(tasks, 9, "x", now="t") is None
    assert task_api.set_status(tasks, 9, TaskStatus.DONE, now="t") is None
    assert tasks == [_t(1)]


def test_delete_removes_every_match_and_keeps_order() -> None:
    tasks = [_t(3), _t(1), _t(2), _t(1), _t(5)]
    assert task_api.delete_tasks(tasks, 1) == 2
    assert [t.id for t in tasks] == [3, 2, 5]

    assert task_api.delete_tasks(tasks, 42) == 0
    assert [t.id for t in tasks] == [3, 2, 5]


def test_filter_by_status() -> None:
    tasks = [_t(1), _t(2, TaskStatus.DONE), _t(3, TaskStatus.IN_PROGRESS), _t(4, TaskStatus.DONE)]

    assert task_api.filter_by_status(tasks) == tasks
    assert [t.id for t in task_api.filter_by_status(tasks, "done")] == [2, 4]
    assert [t.id for t in task_api.filter_by_status(tasks, "In-Progress")] == [3]
    assert task_api.filter_by_status(tasks, "someday") == []
