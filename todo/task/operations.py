"""Task operations: load, apply one change, save."""

import logging
from datetime import time

from todo.errors import NotFoundError
from todo.lib.store import TaskStore
from todo.models import DEFAULT_DUE_TIME, Task, next_id, parse_due, validate_name

logger = logging.getLogger(__name__)


def _find(tasks: list[Task], task_id: int) -> Task:
    for task in tasks:
        if task.id == task_id:
            return task
    raise NotFoundError(task_id)


def add_task(
    store: TaskStore,
    name: str,
    due: str | None = None,
    due_time: time = DEFAULT_DUE_TIME,
) -> Task:
    name = validate_name(name)
    due_at = parse_due(due, due_time) if due else None

    tasks = store.load()
    task = Task(id=next_id(tasks), name=name, due=due_at)
    tasks.append(task)
    store.save(tasks)
    logger.info(f"Added task {task.id}")
    return task


def list_tasks(store: TaskStore) -> list[Task]:
    return store.load()


def done_task(store: TaskStore, task_id: int) -> Task:
    tasks = store.load()
    task = _find(tasks, task_id)
    task.done = True
    store.save(tasks)
    logger.info(f"Marked task {task_id} done")
    return task


def delete_task(store: TaskStore, task_id: int) -> Task:
    tasks = store.load()
    task = _find(tasks, task_id)
    store.save([t for t in tasks if t is not task])
    logger.info(f"Deleted task {task_id}")
    return task


def modify_task(
    store: TaskStore,
    task_id: int,
    name: str | None = None,
    due: str | None = None,
    due_time: time = DEFAULT_DUE_TIME,
) -> Task:
    """Replace name and/or due date. Empty values leave the field as is."""
    tasks = store.load()
    task = _find(tasks, task_id)

    if name and name.strip():
        task.name = name
    if due:
        task.due = parse_due(due, due_time)

    store.save(tasks)
    logger.info(f"Modified task {task_id}")
    return task
