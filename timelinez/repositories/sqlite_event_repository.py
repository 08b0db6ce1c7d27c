# Rev 0.2.0
from __future__ import annotations

import sqlite3
from typing import List, Optional, Sequence

from timelinez.models.entities import Event
from timelinez.repositories.base_repository import SQLiteRepository
from timelinez.repositories.db import utc_now_iso

_COLUMNS = "id, task_id, start_date, end_date, label, color, created_at_utc"


class SQLiteEventRepository(SQLiteRepository):
    """
    Date-ranged events owned by a task.

    Schema expectation:

      events(
        id INTEGER PRIMARY KEY,
        task_id INTEGER NOT NULL REFERENCES tasks(id),
        start_date TEXT NOT NULL,      -- YYYY-MM-DD
        end_date TEXT NOT NULL,        -- inclusive, >= start_date
        label TEXT NOT NULL,
        color TEXT NOT NULL,
        created_at_utc TEXT NOT NULL
      )
    """

    @staticmethod
    def _row_to_event(row: sqlite3.Row) -> Event:
        return Event(
            id=row["id"],
            task_id=row["task_id"],
            start_date=row["start_date"],
            end_date=row["end_date"],
            label=row["label"],
            color=row["color"],
            created_at_utc=row["created_at_utc"],
        )

    # -------------------------
    # CRUD
    # -------------------------
    def insert_event(
        self,
        *,
        task_id: int,
        start_date: str,
        end_date: str,
        label: str = "",
        color: str = "",
    ) -> Event:
        now = utc_now_iso()
        cur = self._execute(
            """
            INSERT INTO events(task_id, start_date, end_date, label, color, created_at_utc)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (task_id, start_date, end_date, label, color, now),
        )
        return Event(
            id=int(cur.lastrowid),
            task_id=task_id,
            start_date=start_date,
            end_date=end_date,
            label=label,
            color=color,
            created_at_utc=now,
        )

    def get_event(self, event_id: int) -> Optional[Event]:
        row = self._fetch_one(f"SELECT {_COLUMNS} FROM events WHERE id = ?", (event_id,))
        return self._row_to_event(row) if row else None

    def update_event_fields(
        self,
        event_id: int,
        *,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        label: Optional[str] = None,
        color: Optional[str] = None,
    ) -> Optional[Event]:
        sets, params = [], []
        for col, val in (("start_date", start_date), ("end_date", end_date), ("label", label), ("color", color)):
            if val is not None:
                sets.append(f"{col} = ?")
                params.append(val)
        if sets:
            params.append(event_id)
            cur = self._execute(f"UPDATE events SET {', '.join(sets)} WHERE id = ?", tuple(params))
            if cur.rowcount == 0:
                return None
        return self.get_event(event_id)

    def delete_event(self, event_id: int) -> int:
        return self._execute("DELETE FROM events WHERE id = ?", (event_id,)).rowcount

    def delete_for_task(self, task_id: int) -> int:
        return self._execute("DELETE FROM events WHERE task_id = ?", (task_id,)).rowcount

    def delete_for_tasks(self, task_ids: Sequence[int]) -> int:
        if not task_ids:
            return 0
        marks = ", ".join("?" * len(task_ids))
        return self._execute(f"DELETE FROM events WHERE task_id IN ({marks})", tuple(task_ids)).rowcount

    def delete_all(self) -> int:
        return self._execute("DELETE FROM events").rowcount

    # -------------------------
    # Listings
    # -------------------------
    def list_events(self) -> List[Event]:
        rows = self._fetch_all(f"SELECT {_COLUMNS} FROM events ORDER BY start_date, id")
        return [self._row_to_event(r) for r in rows]

    def list_events_for_task(self, task_id: int) -> List[Event]:
        rows = self._fetch_all(
            f"SELECT {_COLUMNS} FROM events WHERE task_id = ? ORDER BY start_date, id",
            (task_id,),
        )
        return [self._row_to_event(r) for r in rows]

    def count_events(self) -> int:
        row = self._fetch_one("SELECT COUNT(1) FROM events")
        return int(row[0]) if row else 0

