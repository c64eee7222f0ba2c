# src/task_tracker/config.py

"""Settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object per process, passed down explicitly.
- Every value has a default; an empty environment is a valid configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TASK_CLI"

DEFAULT_TASKS_FILE = "tasks.txt"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    return v.strip()


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw.strip()).expanduser()


def _env_optional_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw.strip()).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file: Path | None

    # ---- Local data paths ----
    data_dir: Path
    tasks_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "task-cli")
        log_level = _env(_k("LOG_LEVEL"), "WARNING").upper()
        log_file = _env_optional_path(_k("LOG_FILE"))

        data_dir = _env_path(_k("DATA_DIR"), Path("."))
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / DEFAULT_TASKS_FILE)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_file=log_file,
            data_dir=data_dir,
            tasks_path=tasks_path,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load ./.env (real environment wins) and build Settings once."""
    load_dotenv(find_dotenv(usecwd=True), override=False)
    return Settings.from_env()
