import pytest

from hiretrack.database import Collection, Database, InMemoryDatabase
from hiretrack.utils.exceptions import NotFoundError

from conftest import run


def make_collection():
    return Collection("Candidate", [
        {"id": 1, "name": "Ana"},
        {"id": 4, "name": "Ben"},
        {"id": 2, "name": "Cy"},
    ])


def test_all_keeps_insertion_order():
    assert [r["id"] for r in make_collection().all()] == [1, 4, 2]


def test_insert_assigns_max_id_plus_one():
    store = make_collection()
    created = store.insert({"name": "Dee", "id": 99})
    assert created["id"] == 5
    assert store.get(5) == {"id": 5, "name": "Dee"}


def test_insert_into_empty_store_starts_at_one():
    assert Collection("Position").insert({"title": "QA"})["id"] == 1


def test_reads_return_copies():
    store = make_collection()
    record = store.get(1)
    record["name"] = "Changed"
    store.all()[0]["name"] = "Also changed"
    assert store.get(1)["name"] == "Ana"


def test_replace_keeps_id():
    store = make_collection()
    store.replace(4, {"id": 40, "name": "Benjamin"})
    assert store.get(4) == {"id": 4, "name": "Benjamin"}


def test_remove_returns_record_and_get_fails_afterwards():
    store = make_collection()
    assert store.remove(4) == {"id": 4, "name": "Ben"}
    with pytest.raises(NotFoundError) as excinfo:
        store.get(4)
    assert str(excinfo.value) == "Candidate not found"


def test_remove_missing_id_raises():
    with pytest.raises(NotFoundError):
        make_collection().remove(42)


def test_child_ids_move_past_fixture_ids():
    db = InMemoryDatabase(candidates=[{
        "id": 1, "name": "Ana", "email": "ana@example.com",
        "notes": [{"id": 9999999999999, "content": "x"}],
    }])
    assert db.child_ids.next(now_ms=1) == 10000000000000


def test_connect_loads_fixtures_and_disconnect_releases(tmp_path):
    (tmp_path / "positions.json").write_text('[{"id": 3, "title": "QA"}]')
    run(Database.connect(tmp_path))
    try:
        db = Database.get_database()
        assert len(db.positions) == 1
        assert len(db.candidates) == 0
    finally:
        run(Database.disconnect())
    with pytest.raises(RuntimeError):
        Database.get_database()
