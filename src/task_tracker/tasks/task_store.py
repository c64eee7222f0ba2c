# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..errors import ParseError, StoreIOError
from .task_codec import decode_task, encode_task
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Flat-file task store.

    The whole file is the unit of persistence:
    - load() reads every record into a list
    - save() rewrites the file in full (temp file + os.replace)

    There is no locking; two processes saving at once may lose updates.
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.debug("Task file %s does not exist yet; starting empty.", self._path)
            return []

        try:
            text = self._path.read_text("utf-8")
        except OSError as e:
            raise StoreIOError(f"Failed to read {self._path}: {e}", path=str(self._path)) from e
        except UnicodeDecodeError as e:
            raise ParseError(f"{self._path} is not valid UTF-8: {e.reason} at byte {e.start}") from e

        tasks: list[Task] = []
        for line_no, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                tasks.append(decode_task(line, line_no=line_no))
            except ParseError:
                logger.debug("Malformed record in %s at line %d", self._path, line_no)
                raise

        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        lines = [encode_task(t) + "\n" for t in tasks]
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8", newline="\n") as fh:
                fh.writelines(lines)
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StoreIOError(f"Failed to write {self._path}: {e}", path=str(self._path)) from e

        logger.debug("Saved %d tasks to %s", len(lines), self._path)
