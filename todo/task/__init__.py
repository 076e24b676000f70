"""Task primitive: the tracked to-do items and their commands."""

from .cli import app, main
from .operations import add_task, delete_task, done_task, list_tasks, modify_task

__all__ = [
    "add_task",
    "app",
    "delete_task",
    "done_task",
    "list_tasks",
    "main",
    "modify_task",
]
