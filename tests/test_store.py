# tests/test_store.py

from __future__ import annotations

from tasklist.models import Task
from tasklist.store import TaskStore


def test_add_appends_open_tasks_in_order() -> None:
    store = TaskStore()
    for name in ("one", "two", "three"):
        store.add(name)

    assert store.tasks == [Task("one"), Task("two"), Task("three")]
    assert all(not t.closed for t in store)


def test_add_accepts_empty_name() -> None:
    store = TaskStore()
    store.add("")
    assert store.tasks == [Task("", False)]


def test_close_marks_only_that_task() -> None:
    store = TaskStore([Task("a"), Task("b"), Task("c")])
    store.close(1)

    assert store.tasks == [Task("a"), Task("b", True), Task("c")]


def test_close_out_of_range_is_noop() -> None:
    store = TaskStore([Task("a"), Task("b")])
    before = store.tasks

    store.close(2)
    store.close(99)
    store.close(-1)

    assert store.tasks == before


def test_close_on_empty_store_is_noop() -> None:
    store = TaskStore()
    store.close(0)
    assert len(store) == 0


def test_close_twice_keeps_task_closed() -> None:
    store = TaskStore([Task("a")])
    store.close(0)
    store.close(0)
    assert store[0] == Task("a", True)


def test_clear_then_add_yields_single_task() -> None:
    store = TaskStore([Task("a", True), Task("b")])
    store.clear()
    store.add("x")

    assert store.tasks == [Task("x", False)]


def test_tasks_property_is_a_copy() -> None:
    store = TaskStore([Task("a")])
    snapshot = store.tasks
    snapshot.append(Task("b"))
    assert len(store) == 1


def test_store_does_not_share_records_with_caller() -> None:
    loaded = [Task("a"), Task("b")]
    store = TaskStore(loaded)

    store.close(0)

    assert loaded == [Task("a"), Task("b")]
    assert store[0] == Task("a", True)
