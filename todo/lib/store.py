"""JSON file storage: whole-file load and replace of the task list."""

import json
import logging
import os
import tempfile
from pathlib import Path

from todo.errors import DecodeError, StoreError
from todo.models import Task

logger = logging.getLogger(__name__)


def dumps(tasks: list[Task]) -> str:
    return json.dumps([t.to_dict() for t in tasks], indent=2, ensure_ascii=False) + "\n"


def loads(data: str) -> list[Task]:
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        raise DecodeError(f"tasks file is not valid JSON: {e}") from e
    if not isinstance(raw, list):
        raise DecodeError(f"tasks file must hold a list, got {type(raw).__name__}")
    return [Task.from_dict(item) for item in raw]


class TaskStore:
    """Tasks persisted as one indented JSON array.

    Every invocation loads the full list and saves it back whole. There is no
    locking; concurrent writers race and the last one wins.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> list[Task]:
        """Read all tasks. A missing file is an empty store, not an error."""
        try:
            with open(self.path, encoding="utf-8") as f:
                data = f.read()
        except FileNotFoundError:
            logger.debug(f"No tasks file at {self.path}, starting empty")
            return []
        except OSError as e:
            raise StoreError(f"cannot read {self.path}: {e}") from e

        tasks = loads(data)
        logger.debug(f"Loaded {len(tasks)} tasks from {self.path}")
        return tasks

    def _file_mode(self) -> int:
        """Mode for the rewritten file: the current one, else what open() would give."""
        try:
            return os.stat(self.path).st_mode & 0o777
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    def save(self, tasks: list[Task]) -> None:
        """Replace the file with the given tasks.

        Writes a sibling temp file first and renames it over the target, so
        readers never see a half-written list.
        """
        data = dumps(tasks)
        tmp_name = None
        try:
            if self.path.parent != Path():
                self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(data)
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as e:
            raise StoreError(f"cannot write {self.path}: {e}") from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.debug(f"Could not remove temp file {tmp_name}")
        logger.debug(f"Saved {len(tasks)} tasks to {self.path}")
