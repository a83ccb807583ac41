from domain.entities import Task
from infrastructure.database import Database


def test_next_id_uses_milliseconds():
    db = Database(clock=lambda: 1234.5678)
    assert db.next_id() == "1234567"


def test_next_id_unique_within_same_millisecond():
    db = Database(clock=lambda: 1000.0)
    ids = [db.next_id() for _ in range(3)]
    assert ids == ["1000000", "1000001", "1000002"]


def test_next_id_never_goes_backwards():
    times = iter([2000.0, 1000.0])
    db = Database(clock=lambda: next(times))
    assert db.next_id() == "2000000"
    assert db.next_id() == "2000001"


def test_starts_empty():
    assert Database().get_all_tasks() == []


def test_get_all_tasks_returns_copy():
    db = Database()
    db.create_task(Task(id="1", title="t"))
    listed = db.get_all_tasks()
    listed.clear()
    assert len(db.get_all_tasks()) == 1


def test_delete_removes_every_match():
    db = Database()
    db.create_task(Task(id="1", title="a"))
    db.create_task(Task(id="1", title="b"))
    db.create_task(Task(id="2", title="c"))
    assert db.delete_task("1") == 2
    assert [task.id for task in db.get_all_tasks()] == ["2"]


def test_update_unknown_returns_none():
    db = Database()
    assert db.update_task("nope", Task(id="nope", title="x")) is None
    assert db.get_all_tasks() == []
