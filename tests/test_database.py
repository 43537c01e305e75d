import sqlite3
from dataclasses import replace

import pytest

from jobopenings.database import OpeningNotFound, OpeningStore, initialize_sqlite


@pytest.fixture
def store(tmp_path):
    with OpeningStore(tmp_path / "test.db") as opened:
        yield opened


def _create(store, role="Engineer", salary=4200, remote=True):
    return store.create(role, "Acme", "Lisbon", remote, "https://example.com/jobs", salary)


def test_create_then_get_round_trips(store):
    created = _create(store)
    assert store.get(created.id) == created
    assert created.deleted_at is None
    assert created.created_at == created.updated_at


def test_ids_increase(store):
    first = _create(store)
    second = _create(store, role="Designer")
    assert second.id > first.id


def test_get_accepts_numeric_string(store):
    created = _create(store)
    assert store.get(str(created.id)) == created


@pytest.mark.parametrize("bad_id", ["abc", "1; DROP TABLE openings", "", True, 1.5])
def test_get_rejects_non_numeric_ids(store, bad_id):
    _create(store)
    with pytest.raises(OpeningNotFound):
        store.get(bad_id)


def test_get_missing_raises(store):
    with pytest.raises(OpeningNotFound) as info:
        store.get(999)
    assert str(info.value) == "record not found"
    assert info.value.opening_id == 999


def test_list_returns_live_openings_in_order(store):
    a = _create(store, role="A")
    b = _create(store, role="B")
    c = _create(store, role="C")
    store.delete(b)
    assert [o.id for o in store.list()] == [a.id, c.id]


def test_list_empty(store):
    assert store.list() == []


def test_delete_is_soft_and_hides_opening(store):
    created = _create(store)
    deleted = store.delete(created)
    assert deleted.deleted_at is not None
    assert deleted.id == created.id
    with pytest.raises(OpeningNotFound):
        store.get(created.id)
    with pytest.raises(OpeningNotFound):
        store.delete(created)


def test_save_updates_fields(store):
    created = _create(store)
    changed = replace(created, role="Lead", salary=9000, remote=False)
    saved = store.save(changed)
    assert saved.updated_at >= created.updated_at
    fetched = store.get(created.id)
    assert fetched == saved
    assert fetched.role == "Lead"
    assert fetched.remote is False
    assert fetched.created_at == created.created_at


def test_save_of_deleted_opening_raises(store):
    created = _create(store)
    store.delete(created)
    with pytest.raises(OpeningNotFound):
        store.save(created)


def test_data_persists_across_reopen(tmp_path):
    path = tmp_path / "persist.db"
    with OpeningStore(path) as first:
        created = _create(first)
    with OpeningStore(path) as second:
        assert second.get(created.id) == created


def test_context_manager_closes(tmp_path):
    with OpeningStore(tmp_path / "closed.db") as opened:
        pass
    with pytest.raises(sqlite3.ProgrammingError):
        opened.list()


def test_initialize_creates_missing_file(tmp_path, capsys):
    path = tmp_path / "db" / "main.db"
    with initialize_sqlite(path) as opened:
        assert opened.list() == []
    assert path.is_file()
    assert "Database file does not exist. Creating a new one." in capsys.readouterr().out


def test_initialize_existing_file_is_silent(tmp_path, capsys):
    path = tmp_path / "main.db"
    with initialize_sqlite(path) as opened:
        created = _create(opened)
    capsys.readouterr()
    with initialize_sqlite(path) as reopened:
        assert reopened.get(created.id) == created
    assert "does not exist" not in capsys.readouterr().out