"""Tests for the SQLite store and the schema it maps."""

import sqlite3

import pytest

from autoservice_api.app.core.config import settings
from autoservice_api.app.core.db import get_connection, init_db
from autoservice_api.app.core.errors import AlreadyExistsError, StoreFailureError
from autoservice_api.app.core.store import Store, join_brands, split_brands
from autoservice_api.app.schemas.task import TaskRead


def _task(task_id, mechanic_id, complexity, brand="Audi"):
    return TaskRead(id=task_id, mechanic_id=mechanic_id, brand=brand, name="job", complexity=complexity)


class TestSchema:
    def test_default_brands_are_seeded(self, store):
        names = [brand.name for brand in store.list_brands()]
        assert names == ["Audi", "BMW", "Toyota", "Ford"]

    def test_init_db_is_idempotent(self, db_path, store):
        init_db()
        assert len(store.list_brands()) == 4

    def test_migrations_are_recorded(self, db_path):
        conn = get_connection()
        try:
            versions = [row["version"] for row in conn.execute("SELECT version FROM migrations")]
        finally:
            conn.close()
        assert versions == [1, 2]

    def test_brands_column_is_comma_joined(self, store, make_mechanic):
        mechanic = make_mechanic(["Audi", "BMW"])
        conn = get_connection()
        try:
            row = conn.execute("SELECT brands FROM mechanics WHERE id = ?", (mechanic.id,)).fetchone()
        finally:
            conn.close()
        assert row["brands"] == "Audi,BMW"
        assert store.find_mechanic(mechanic.id).brands == ["Audi", "BMW"]

    def test_brand_list_round_trip(self):
        assert split_brands(join_brands(["Toyota", "Audi"])) == ["Toyota", "Audi"]


class TestTaskPrimitives:
    def test_sum_is_zero_without_tasks(self, store, make_mechanic):
        mechanic = make_mechanic(["Audi"])
        assert store.sum_task_complexity(mechanic.id) == 0

    def test_sum_and_exclude(self, store, make_mechanic):
        mechanic = make_mechanic(["Audi"])
        with store.transaction():
            store.insert_task(_task("t-1", mechanic.id, 3))
            store.insert_task(_task("t-2", mechanic.id, 4))
        assert store.sum_task_complexity(mechanic.id) == 7
        assert store.sum_task_complexity(mechanic.id, exclude_task_id="t-1") == 4

    def test_update_fields_requires_matching_owner(self, store, make_mechanic):
        owner = make_mechanic(["Audi"])
        other = make_mechanic(["Audi"])
        with store.transaction():
            store.insert_task(_task("t-1", owner.id, 3))
            assert store.update_task_fields("t-1", other.id, "BMW", "x", 9) == 0
            assert store.update_task_fields("t-1", owner.id, "BMW", "x", 9) == 1
        assert store.find_task("t-1") == TaskRead(
            id="t-1", mechanic_id=owner.id, brand="BMW", name="x", complexity=9
        )

    def test_delete_tasks_by_mechanic(self, store, make_mechanic):
        first = make_mechanic(["Audi"])
        second = make_mechanic(["Audi"])
        with store.transaction():
            store.insert_task(_task("t-1", first.id, 1))
            store.insert_task(_task("t-2", first.id, 1))
            store.insert_task(_task("t-3", second.id, 1))
            store.delete_tasks_by_mechanic(first.id)
        assert store.list_tasks_by_mechanic(first.id) == []
        assert [task.id for task in store.list_tasks_by_mechanic(second.id)] == ["t-3"]

    def test_task_requires_existing_mechanic(self, store):
        with pytest.raises(sqlite3.IntegrityError):
            with store.transaction():
                store.insert_task(_task("t-1", "no-such-mechanic", 1))


class TestFailures:
    def test_duplicate_brand(self, store):
        with pytest.raises(AlreadyExistsError):
            with store.transaction():
                store.insert_brand("Audi")
        assert len(store.list_brands()) == 4

    def test_transaction_rolls_back_on_error(self, store, make_mechanic):
        mechanic = make_mechanic(["Audi"])
        with pytest.raises(RuntimeError):
            with store.transaction():
                store.insert_task(_task("t-1", mechanic.id, 1))
                raise RuntimeError("boom")
        assert store.find_task("t-1") is None

    def test_driver_errors_become_store_failures(self, db_path):
        with pytest.raises(StoreFailureError) as excinfo:
            with Store.open() as store:
                store._conn.execute("SELECT * FROM no_such_table")
        assert isinstance(excinfo.value.cause, sqlite3.OperationalError)
        assert excinfo.value.__cause__ is excinfo.value.cause

    def test_unopenable_database_is_a_store_failure(self, tmp_path, monkeypatch):
        monkeypatch.setattr(settings, "database_url", str(tmp_path / "missing" / "dir" / "x.db"))
        with pytest.raises(StoreFailureError):
            with Store.open():
                pass
