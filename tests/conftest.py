# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_tracker.config import Settings
from task_tracker.core.state import AppState
from task_tracker.tasks.task_store import TaskStore

from .fakes import FakeClock


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a per-test temporary directory; no env reads."""
    return Settings(
        app_name="task-cli-test",
        log_level="WARNING",
        log_file=None,
        data_dir=tmp_path,
        tasks_path=tmp_path / "tasks.txt",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(settings: Settings) -> TaskStore:
    return TaskStore(settings.tasks_path)


@pytest.fixture()
def state(settings: Settings, store: TaskStore, clock: FakeClock) -> AppState:
    """
    AppState wired with the real file store and a deterministic clock.

    The file store is kept real because its exact on-disk output is part of what we test.
    """
    return AppState(settings=settings, task_store=store, clock=clock)
