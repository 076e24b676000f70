import re
from dataclasses import dataclass
from datetime import datetime, time
from typing import Any

from todo.errors import DecodeError, ValidationError

DATE_FORMAT = "%Y-%m-%d"
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"
DEFAULT_DUE_TIME = time(23, 59)

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@dataclass
class Task:
    id: int
    name: str
    done: bool = False
    due: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "done": self.done,
            "due": self.due.strftime(TIMESTAMP_FORMAT) if self.due else None,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Task":
        """Build a Task from one decoded JSON record.

        Unknown keys are ignored. Raises DecodeError when a required field is
        missing or has the wrong type.
        """
        if not isinstance(data, dict):
            raise DecodeError(f"task record must be an object, got {type(data).__name__}")

        task_id = data.get("id")
        name = data.get("name")
        done = data.get("done", False)
        if isinstance(task_id, bool) or not isinstance(task_id, int):
            raise DecodeError(f"task record has invalid id: {task_id!r}")
        if not isinstance(name, str):
            raise DecodeError(f"task {task_id} has invalid name: {name!r}")
        if not isinstance(done, bool):
            raise DecodeError(f"task {task_id} has invalid done flag: {done!r}")

        return cls(id=task_id, name=name, done=done, due=decode_due(data.get("due")))


def decode_due(raw: Any) -> datetime | None:
    """Decode a stored due timestamp.

    None, empty strings and the zero time (year 1) all mean "no due date".
    Timezone-aware values keep their wall-clock time and lose the zone, so
    the stored calendar date never shifts.
    """
    if raw is None or raw == "":
        return None
    if not isinstance(raw, str):
        raise DecodeError(f"invalid due timestamp: {raw!r}")
    try:
        due = datetime.fromisoformat(raw)
    except ValueError as e:
        raise DecodeError(f"invalid due timestamp {raw!r}: {e}") from e
    if due.year == 1:
        return None
    if due.tzinfo is not None:
        due = due.replace(tzinfo=None)
    return due


def parse_due(value: str, due_time: time = DEFAULT_DUE_TIME) -> datetime:
    """Parse a YYYY-MM-DD date and pin it to due_time on that day."""
    value = value.strip()
    if not _DATE_RE.match(value):
        raise ValidationError(f"invalid date format - {value!r} does not match YYYY-MM-DD")
    try:
        day = datetime.strptime(value, DATE_FORMAT)
    except ValueError as e:
        raise ValidationError(f"invalid date format - {e}") from e
    return datetime.combine(day.date(), due_time)


def parse_id(value: str | int | None) -> int:
    if value is None or value == "":
        raise ValidationError("task id is required (-id)")
    try:
        task_id = int(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"invalid task id: {value!r}") from e
    if task_id <= 0:
        raise ValidationError(f"task id must be a positive integer, got {task_id}")
    return task_id


def validate_name(value: str | None) -> str:
    if value is None or not value.strip():
        raise ValidationError("task name is required (-name)")
    return value


def next_id(tasks: list[Task]) -> int:
    return max((t.id for t in tasks), default=0) + 1
