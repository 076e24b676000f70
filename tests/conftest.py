import os
import time

import pytest

from todo import config
from todo.lib.store import TaskStore


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep every test away from the real working directory and user config.

    Runs inside tmp_path with no config file and no TODO_FILE override.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TODO_CONFIG", str(tmp_path / "config.yaml"))
    monkeypatch.delenv("TODO_FILE", raising=False)
    config.clear_cache()
    yield tmp_path
    config.clear_cache()


@pytest.fixture
def tasks_path(tmp_path):
    return tmp_path / "tasks.json"


@pytest.fixture
def store(tasks_path):
    return TaskStore(tasks_path)


@pytest.fixture
def east_of_utc():
    """Pin the process time zone to UTC+8 for the duration of a test."""
    old = os.environ.get("TZ")
    os.environ["TZ"] = "Asia/Shanghai"
    time.tzset()
    yield
    if old is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = old
    time.tzset()
