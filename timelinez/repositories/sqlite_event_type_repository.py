# Rev 0.2.0

# timelineZ – SQLiteEventTypeRepository (Rev 0.2.0)
# Reusable (label, color) presets offered when authoring events.

from __future__ import annotations
import sqlite3
from typing import List, Optional

from timelinez.models.entities import CustomEventType
from timelinez.repositories.base_repository import SQLiteRepository
from timelinez.repositories.db import utc_now_iso


class SQLiteEventTypeRepository(SQLiteRepository):
    """
    Thin wrapper around the 'custom_event_types' table.
    Events copy label/color by value, so nothing here references events.
    """

    @staticmethod
    def _row_to_type(row: sqlite3.Row) -> CustomEventType:
        return CustomEventType(
            id=row["id"],
            label=row["label"],
            color=row["color"],
            created_at_utc=row["created_at_utc"],
        )

    def list_types(self) -> List[CustomEventType]:
        rows = self._fetch_all("SELECT id, label, color, created_at_utc FROM custom_event_types ORDER BY id")
        return [self._row_to_type(r) for r in rows]

    def get_type(self, type_id: int) -> Optional[CustomEventType]:
        row = self._fetch_one(
            "SELECT id, label, color, created_at_utc FROM custom_event_types WHERE id = ?",
            (type_id,),
        )
        return self._row_to_type(row) if row else None

    def insert_type(self, *, label: str, color: str) -> CustomEventType:
        now = utc_now_iso()
        cur = self._execute(
            "INSERT INTO custom_event_types(label, color, created_at_utc) VALUES (?, ?, ?)",
            (label, color, now),
        )
        return CustomEventType(id=int(cur.lastrowid), label=label, color=color, created_at_utc=now)

    def update_type(self, type_id: int, *, label: Optional[str] = None, color: Optional[str] = None) -> Optional[CustomEventType]:
        sets, params = [], []
        if label is not None:
            sets.append("label = ?")
            params.append(label)
        if color is not None:
            sets.append("color = ?")
            params.append(color)
        if sets:
            params.append(type_id)
            cur = self._execute(f"UPDATE custom_event_types SET {', '.join(sets)} WHERE id = ?", tuple(params))
            if cur.rowcount == 0:
                return None
        return self.get_type(type_id)

    def delete_type(self, type_id: int) -> int:
        return self._execute("DELETE FROM custom_event_types WHERE id = ?", (type_id,)).rowcount
