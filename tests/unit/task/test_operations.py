"""Task operations: core contracts and boundaries."""

from datetime import datetime, time

import pytest

from todo.errors import NotFoundError, StoreError, ValidationError
from todo.models import Task
from todo.task import operations as api


def test_add_task_assigns_increasing_ids(store):
    ids = [api.add_task(store, f"T{i}").id for i in range(4)]
    assert ids == [1, 2, 3, 4]
    assert [t.name for t in api.list_tasks(store)] == ["T0", "T1", "T2", "T3"]


def test_add_task_creates_open_with_due(store):
    task = api.add_task(store, "Buy milk", "2030-01-01")
    assert task.done is False
    assert task.due == datetime(2030, 1, 1, 23, 59)
    assert api.list_tasks(store) == [task]


def test_add_task_honours_due_time(store):
    task = api.add_task(store, "x", "2030-01-01", due_time=time(8, 0))
    assert task.due == datetime(2030, 1, 1, 8, 0)


def test_next_id_follows_current_max(store):
    api.add_task(store, "a")
    api.add_task(store, "b")
    api.delete_task(store, 2)
    assert api.add_task(store, "c").id == 2

    api.add_task(store, "d")
    api.delete_task(store, 1)
    assert api.add_task(store, "e").id == 4


def test_add_task_validates_before_touching_store(store, tasks_path):
    with pytest.raises(ValidationError):
        api.add_task(store, "")
    with pytest.raises(ValidationError):
        api.add_task(store, "x", "2030/01/01")
    assert not tasks_path.exists()


def test_add_task_refuses_to_overwrite_corrupt_file(store, tasks_path):
    tasks_path.write_text("garbage")
    with pytest.raises(StoreError):
        api.add_task(store, "x")
    assert tasks_path.read_text() == "garbage"


def test_done_task_is_idempotent(store):
    api.add_task(store, "a", "2030-01-01")
    api.add_task(store, "b")

    api.done_task(store, 1)
    after_first = api.list_tasks(store)
    api.done_task(store, 1)

    assert api.list_tasks(store) == after_first
    assert after_first[0].done is True
    assert after_first[1].done is False


def test_done_task_not_found_on_empty_store(store):
    with pytest.raises(NotFoundError) as exc:
        api.done_task(store, 1)
    assert exc.value.task_id == 1


def test_delete_task_preserves_others(store):
    for name in ("a", "b", "c"):
        api.add_task(store, name)
    api.done_task(store, 3)
    before = api.list_tasks(store)

    deleted = api.delete_task(store, 2)

    assert deleted.name == "b"
    assert api.list_tasks(store) == [before[0], before[2]]


def test_delete_task_not_found_leaves_file(store, tasks_path):
    api.add_task(store, "a")
    content = tasks_path.read_bytes()
    with pytest.raises(NotFoundError):
        api.delete_task(store, 9)
    assert tasks_path.read_bytes() == content


def test_modify_name_only_keeps_due(store):
    api.add_task(store, "a", "2030-01-01")
    task = api.modify_task(store, 1, name="renamed")
    assert task.name == "renamed"
    assert task.due == datetime(2030, 1, 1, 23, 59)


def test_modify_due_only_keeps_name(store):
    api.add_task(store, "a")
    task = api.modify_task(store, 1, due="2031-06-15")
    assert task.name == "a"
    assert task.due == datetime(2031, 6, 15, 23, 59)


def test_modify_uses_same_normalization_as_add(store):
    added = api.add_task(store, "a", "2030-01-01")
    modified = api.modify_task(store, 1, due="2030-01-01")
    assert modified.due == added.due


def test_modify_with_nothing_is_noop_save(store, tasks_path):
    api.add_task(store, "a", "2030-01-01")
    content = tasks_path.read_bytes()
    api.modify_task(store, 1)
    api.modify_task(store, 1, name="", due="")
    assert tasks_path.read_bytes() == content


def test_modify_bad_date_saves_nothing(store):
    api.add_task(store, "a")
    with pytest.raises(ValidationError):
        api.modify_task(store, 1, name="new name", due="someday")
    assert api.list_tasks(store) == [Task(id=1, name="a")]


def test_modify_not_found(store):
    with pytest.raises(NotFoundError):
        api.modify_task(store, 5, name="x")
