# src/task_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..config import Settings
from ..tasks.task_api import now_iso
from .ports import Clock, TaskRepo


@dataclass
class AppState:
    # Settings travel with the state so commands never read config globals.
    settings: Settings
    task_store: TaskRepo
    clock: Clock = now_iso
