# tests/test_config.py

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from task_tracker.config import Settings, get_settings

ENV_NAMES = (
    "TASK_CLI_APP_NAME",
    "TASK_CLI_LOG_LEVEL",
    "TASK_CLI_LOG_FILE",
    "TASK_CLI_DATA_DIR",
    "TASK_CLI_TASKS_PATH",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    # setenv first so monkeypatch also undoes anything load_dotenv adds later.
    for name in ENV_NAMES:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults_from_empty_environment() -> None:
    s = Settings.from_env()
    assert s.app_name == "task-cli"
    assert s.log_level == "WARNING"
    assert s.log_file is None
    assert s.data_dir == Path(".")
    assert s.tasks_path == Path("tasks.txt")


def test_tasks_path_follows_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASK_CLI_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TASK_CLI_LOG_LEVEL", "debug")
    s = Settings.from_env()
    assert s.tasks_path == tmp_path / "tasks.txt"
    assert s.log_level == "DEBUG"


def test_explicit_paths_win(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASK_CLI_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("TASK_CLI_TASKS_PATH", str(tmp_path / "elsewhere.txt"))
    monkeypatch.setenv("TASK_CLI_LOG_FILE", str(tmp_path / "cli.log"))
    s = Settings.from_env()
    assert s.tasks_path == tmp_path / "elsewhere.txt"
    assert s.log_file == tmp_path / "cli.log"


def test_blank_values_mean_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASK_CLI_APP_NAME", "   ")
    monkeypatch.setenv("TASK_CLI_TASKS_PATH", "")
    s = Settings.from_env()
    assert s.app_name == "task-cli"
    assert s.tasks_path == Path("tasks.txt")


def test_get_settings_reads_dotenv_from_cwd(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        f"TASK_CLI_TASKS_PATH={tmp_path / 'from_dotenv.txt'}\nTASK_CLI_APP_NAME=from-dotenv\n",
        "utf-8",
    )
    monkeypatch.setenv("TASK_CLI_APP_NAME", "from-env")
    monkeypatch.chdir(tmp_path)

    s = get_settings()
    assert s.tasks_path == tmp_path / "from_dotenv.txt"
    # Real environment beats .env.
    assert s.app_name == "from-env"
    assert get_settings() is s
