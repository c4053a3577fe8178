"""
Persistence primitives for mechanics, tasks and brands.

``Store`` wraps one SQLite connection and exposes the point lookups,
scans, writes and the complexity sum used by the services.  Open it
with ``Store.open()``; the connection is committed and closed when the
block exits, and any ``sqlite3.Error`` raised inside the block is
re‑raised as ``StoreFailureError``.

Multi‑step workflows that read before they write (sum complexities,
then insert) must run inside ``store.transaction()``.  It issues
``BEGIN IMMEDIATE`` so the write lock is held from the first read
until commit, serializing concurrent admissions against the same
database file.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator, List, Optional

from .db import get_connection
from .errors import AlreadyExistsError, StoreFailureError
from ..schemas.brand import BrandRead
from ..schemas.mechanic import MechanicRead
from ..schemas.task import TaskRead

logger = logging.getLogger(__name__)

BRAND_SEPARATOR = ","


def join_brands(brands: List[str]) -> str:
    return BRAND_SEPARATOR.join(brands)


def split_brands(value: str) -> List[str]:
    return value.split(BRAND_SEPARATOR)


def _row_to_mechanic(row: sqlite3.Row) -> MechanicRead:
    return MechanicRead(
        id=row["id"],
        name=row["name"],
        brands=split_brands(row["brands"]),
        max_complexity=row["max_complexity"],
    )


def _row_to_task(row: sqlite3.Row) -> TaskRead:
    return TaskRead(
        id=row["id"],
        mechanic_id=row["mechanic_id"],
        brand=row["brand"],
        name=row["name"],
        complexity=row["complexity"],
    )


class Store:
    """Data access for the three autoservice tables over one connection."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    @classmethod
    @contextmanager
    def open(cls) -> Iterator["Store"]:
        """Yield a store on a fresh connection, committing on success."""
        try:
            conn = get_connection()
        except sqlite3.Error as exc:
            logger.exception("Could not open database connection")
            raise StoreFailureError(exc) from exc
        try:
            yield cls(conn)
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            logger.exception("Database operation failed")
            raise StoreFailureError(exc) from exc
        except BaseException:
            conn.rollback()
            raise
        finally:
            conn.close()

    @contextmanager
    def transaction(self) -> Iterator["Store"]:
        """Run the enclosed reads and writes as one write transaction.

        Rolled back if the block raises, so a rejected admission leaves
        no partial effect.
        """
        self._conn.execute("BEGIN IMMEDIATE")
        try:
            yield self
        except BaseException:
            self._conn.rollback()
            raise
        self._conn.commit()

    # ------------------------------------------------------------------
    # Mechanics
    # ------------------------------------------------------------------
    def find_mechanic(self, mechanic_id: str) -> Optional[MechanicRead]:
        row = self._conn.execute(
            "SELECT id, name, brands, max_complexity FROM mechanics WHERE id = ?",
            (mechanic_id,),
        ).fetchone()
        return _row_to_mechanic(row) if row else None

    def list_mechanics(self) -> List[MechanicRead]:
        rows = self._conn.execute(
            "SELECT id, name, brands, max_complexity FROM mechanics ORDER BY rowid"
        ).fetchall()
        return [_row_to_mechanic(row) for row in rows]

    def insert_mechanic(self, mechanic: MechanicRead) -> MechanicRead:
        self._conn.execute(
            "INSERT INTO mechanics (id, name, brands, max_complexity) VALUES (?, ?, ?, ?)",
            (mechanic.id, mechanic.name, join_brands(mechanic.brands), mechanic.max_complexity),
        )
        return mechanic

    def update_mechanic(
        self, mechanic_id: str, name: str, brands: List[str], max_complexity: int
    ) -> int:
        cursor = self._conn.execute(
            "UPDATE mechanics SET name = ?, brands = ?, max_complexity = ? WHERE id = ?",
            (name, join_brands(brands), max_complexity, mechanic_id),
        )
        return cursor.rowcount

    def delete_mechanic(self, mechanic_id: str) -> int:
        cursor = self._conn.execute("DELETE FROM mechanics WHERE id = ?", (mechanic_id,))
        return cursor.rowcount

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------
    def find_task(self, task_id: str) -> Optional[TaskRead]:
        row = self._conn.execute(
            "SELECT id, mechanic_id, brand, name, complexity FROM tasks WHERE id = ?",
            (task_id,),
        ).fetchone()
        return _row_to_task(row) if row else None

    def list_tasks_by_mechanic(self, mechanic_id: str) -> List[TaskRead]:
        rows = self._conn.execute(
            "SELECT id, mechanic_id, brand, name, complexity FROM tasks "
            "WHERE mechanic_id = ? ORDER BY rowid",
            (mechanic_id,),
        ).fetchall()
        return [_row_to_task(row) for row in rows]

    def sum_task_complexity(self, mechanic_id: str, exclude_task_id: Optional[str] = None) -> int:
        """Total complexity of the mechanic's tasks, 0 when it has none.

        ``exclude_task_id`` leaves one task out of the sum; reassignment
        uses it so the task being moved is never counted against its
        destination.
        """
        sql = "SELECT COALESCE(SUM(complexity), 0) AS total FROM tasks WHERE mechanic_id = ?"
        params: tuple = (mechanic_id,)
        if exclude_task_id is not None:
            sql += " AND id != ?"
            params = (mechanic_id, exclude_task_id)
        row = self._conn.execute(sql, params).fetchone()
        return int(row["total"])

    def insert_task(self, task: TaskRead) -> TaskRead:
        self._conn.execute(
            "INSERT INTO tasks (id, mechanic_id, brand, name, complexity) VALUES (?, ?, ?, ?, ?)",
            (task.id, task.mechanic_id, task.brand, task.name, task.complexity),
        )
        return task

    def update_task_owner(self, task_id: str, new_mechanic_id: str) -> int:
        cursor = self._conn.execute(
            "UPDATE tasks SET mechanic_id = ? WHERE id = ?",
            (new_mechanic_id, task_id),
        )
        return cursor.rowcount

    def update_task_fields(
        self, task_id: str, mechanic_id: str, brand: str, name: str, complexity: int
    ) -> int:
        cursor = self._conn.execute(
            "UPDATE tasks SET brand = ?, name = ?, complexity = ? WHERE id = ? AND mechanic_id = ?",
            (brand, name, complexity, task_id, mechanic_id),
        )
        return cursor.rowcount

    def delete_task(self, task_id: str, mechanic_id: str) -> int:
        cursor = self._conn.execute(
            "DELETE FROM tasks WHERE id = ? AND mechanic_id = ?",
            (task_id, mechanic_id),
        )
        return cursor.rowcount

    def delete_tasks_by_mechanic(self, mechanic_id: str) -> None:
        self._conn.execute("DELETE FROM tasks WHERE mechanic_id = ?", (mechanic_id,))

    # ------------------------------------------------------------------
    # Brands
    # ------------------------------------------------------------------
    def list_brands(self) -> List[BrandRead]:
        rows = self._conn.execute("SELECT id, name FROM brands ORDER BY id").fetchall()
        return [BrandRead(id=row["id"], name=row["name"]) for row in rows]

    def insert_brand(self, name: str) -> BrandRead:
        try:
            cursor = self._conn.execute("INSERT INTO brands (name) VALUES (?)", (name,))
        except sqlite3.IntegrityError as exc:
            raise AlreadyExistsError("Brand", name) from exc
        return BrandRead(id=cursor.lastrowid, name=name)
