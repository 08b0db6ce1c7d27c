# Rev 0.2.0
from __future__ import annotations

import sqlite3
from typing import List, Optional

from timelinez.models.entities import Task
from timelinez.repositories.base_repository import SQLiteRepository
from timelinez.repositories.db import utc_now_iso

_COLUMNS = "id, category, task, sort_order, created_at_utc, updated_at_utc"


class SQLiteTaskRepository(SQLiteRepository):
    """
    Task CRUD + category-wide bulk operations.

    Categories are not a table: they are the distinct values of tasks.category,
    compared by exact string equality.
    """

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=row["id"],
            category=row["category"],
            task=row["task"],
            sort_order=row["sort_order"],
            created_at_utc=row["created_at_utc"],
            updated_at_utc=row["updated_at_utc"],
        )

    # -------------------------
    # CRUD
    # -------------------------
    def insert_task(self, *, category: str, task: str, sort_order: int = 0) -> Task:
        now = utc_now_iso()
        cur = self._execute(
            """
            INSERT INTO tasks(category, task, sort_order, created_at_utc, updated_at_utc)
            VALUES (?, ?, ?, ?, ?)
            """,
            (category, task, sort_order, now, now),
        )
        return Task(
            id=int(cur.lastrowid),
            category=category,
            task=task,
            sort_order=sort_order,
            created_at_utc=now,
            updated_at_utc=now,
        )

    def get_task(self, task_id: int) -> Optional[Task]:
        row = self._fetch_one(f"SELECT {_COLUMNS} FROM tasks WHERE id = ?", (task_id,))
        return self._row_to_task(row) if row else None

    def update_task_fields(
        self,
        task_id: int,
        *,
        category: Optional[str] = None,
        task: Optional[str] = None,
        sort_order: Optional[int] = None,
    ) -> Optional[Task]:
        """Patch any subset of fields; updated_at_utc is always refreshed."""
        sets, params = ["updated_at_utc = ?"], [utc_now_iso()]
        if category is not None:
            sets.append("category = ?")
            params.append(category)
        if task is not None:
            sets.append("task = ?")
            params.append(task)
        if sort_order is not None:
            sets.append("sort_order = ?")
            params.append(sort_order)
        params.append(task_id)
        cur = self._execute(f"UPDATE tasks SET {', '.join(sets)} WHERE id = ?", tuple(params))
        if cur.rowcount == 0:
            return None
        return self.get_task(task_id)

    def delete_task(self, task_id: int) -> int:
        cur = self._execute("DELETE FROM tasks WHERE id = ?", (task_id,))
        return cur.rowcount

    def delete_all(self) -> int:
        return self._execute("DELETE FROM tasks").rowcount

    # -------------------------
    # Listings
    # -------------------------
    def list_tasks(self) -> List[Task]:
        rows = self._fetch_all(f"SELECT {_COLUMNS} FROM tasks ORDER BY sort_order, id")
        return [self._row_to_task(r) for r in rows]

    def list_tasks_in_category(self, category: str) -> List[Task]:
        rows = self._fetch_all(
            f"SELECT {_COLUMNS} FROM tasks WHERE category = ? ORDER BY sort_order, id",
            (category,),
        )
        return [self._row_to_task(r) for r in rows]

    def count_tasks(self) -> int:
        row = self._fetch_one("SELECT COUNT(1) FROM tasks")
        return int(row[0]) if row else 0

    def max_sort_order(self, category: Optional[str] = None) -> Optional[int]:
        """Highest sort_order in `category`, or across all tasks when None."""
        if category is None:
            row = self._fetch_one("SELECT MAX(sort_order) FROM tasks")
        else:
            row = self._fetch_one("SELECT MAX(sort_order) FROM tasks WHERE category = ?", (category,))
        return None if row is None or row[0] is None else int(row[0])

    # -------------------------
    # Categories
    # -------------------------
    def list_categories(self) -> List[str]:
        """Distinct categories ordered by their first task's position."""
        rows = self._fetch_all(
            """
            SELECT category, MIN(sort_order) AS first_pos, MIN(id) AS first_id
            FROM tasks
            GROUP BY category
            ORDER BY first_pos, first_id
            """
        )
        return [r["category"] for r in rows]

    def rename_category(self, old: str, new: str) -> int:
        cur = self._execute(
            "UPDATE tasks SET category = ?, updated_at_utc = ? WHERE category = ?",
            (new, utc_now_iso(), old),
        )
        return cur.rowcount

    def delete_category(self, category: str) -> int:
        return self._execute("DELETE FROM tasks WHERE category = ?", (category,)).rowcount

