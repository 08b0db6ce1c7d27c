# Rev 0.2.0

"""Category operations (Rev 0.2.0)
Categories are the distinct values of tasks.category. Every bulk rename or
cascade delete goes through this service so callers never hand-roll it.
"""
from __future__ import annotations

from typing import List

from timelinez.errors import NotFound, ValidationError
from timelinez.repositories.db import Database
from timelinez.repositories.sqlite_event_repository import SQLiteEventRepository
from timelinez.repositories.sqlite_task_repository import SQLiteTaskRepository
from timelinez.utils.logging_setup import get_logger


class CategoryService:
    def __init__(self, db: Database):
        self._db = db
        self._tasks = SQLiteTaskRepository(db)
        self._events = SQLiteEventRepository(db)
        self._log = get_logger("categories")

    def list_categories(self) -> List[str]:
        return self._tasks.list_categories()

    def rename(self, old: str, new: str) -> int:
        """Move every task in `old` to `new`; returns the number of tasks moved."""
        if not new:
            raise ValidationError("New category name must not be empty")
        count = self._tasks.rename_category(old, new)
        if count == 0:
            raise NotFound("category", old)
        self._log.info("Renamed category %r -> %r (%d tasks)", old, new, count)
        return count

    def delete(self, name: str) -> int:
        """Delete every task in `name` and their events; returns tasks removed."""
        with self._db.transaction():
            tasks = self._tasks.list_tasks_in_category(name)
            if not tasks:
                raise NotFound("category", name)
            events = self._events.delete_for_tasks([t.id for t in tasks])
            count = self._tasks.delete_category(name)
        self._log.info("Deleted category %r (%d tasks, %d events)", name, count, events)
        return count
