class TodoError(Exception):
    """Base exception for todo domain errors."""

    pass


class ValidationError(TodoError):
    """Raised when user input is missing or malformed."""

    pass


class NotFoundError(TodoError):
    """Raised when no stored task has the requested id."""

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"task with id {task_id} not found")


class StoreError(TodoError):
    """Raised when the tasks file cannot be read or written."""

    pass


class DecodeError(StoreError):
    """Raised when the tasks file does not hold a list of task records."""

    pass
