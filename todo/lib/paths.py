import os
from pathlib import Path

DEFAULT_TASKS_FILE = "tasks.json"


def config_dir() -> Path:
    """Returns the user config directory, ~/.config/todo."""
    return Path.home() / ".config" / "todo"


def config_file() -> Path:
    """Returns the config file path, honouring TODO_CONFIG."""
    override = os.environ.get("TODO_CONFIG")
    if override:
        return Path(override).expanduser()
    return config_dir() / "config.yaml"


def tasks_file(explicit: str | Path | None = None, configured: str | None = None) -> Path:
    """Resolve the tasks file.

    Precedence: explicit argument, TODO_FILE, configured value, then
    tasks.json in the working directory.
    """
    if explicit:
        return Path(explicit).expanduser()
    override = os.environ.get("TODO_FILE")
    if override:
        return Path(override).expanduser()
    if configured:
        return Path(configured).expanduser()
    return Path(DEFAULT_TASKS_FILE)
