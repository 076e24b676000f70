"""Task formatting for CLI display."""

from datetime import datetime

from todo.lib.format import days_remaining, fit, plural
from todo.models import DATE_FORMAT, Task

NO_DUE_DATE = "no due date"
DEFAULT_NAME_WIDTH = 20


def format_due(task: Task, now: datetime) -> str:
    """Summarize a task's due date relative to now.

    Done tasks show the bare date. Open tasks get an overdue marker once the
    due moment has passed, otherwise the days remaining.
    """
    if task.due is None:
        return NO_DUE_DATE

    date_str = task.due.strftime(DATE_FORMAT)
    if task.done:
        return date_str
    if task.due < now:
        return f"{date_str} (overdue)"
    return f"{date_str} ({plural(days_remaining(task.due, now), 'day')} remaining)"


def format_task_line(task: Task, now: datetime, width: int = DEFAULT_NAME_WIDTH) -> str:
    status = "x" if task.done else " "
    return f"[{status}] {task.id}. {fit(task.name, width)} {format_due(task, now)}"


def format_task_list(
    tasks: list[Task], now: datetime | None = None, width: int = DEFAULT_NAME_WIDTH
) -> str:
    """Format list of tasks for display.

    Returns a header followed by one line per task, in store order.
    """
    now = now or datetime.now()
    lines = ["Tasks:"]
    lines.extend(format_task_line(task, now, width) for task in tasks)
    return "\n".join(lines)
