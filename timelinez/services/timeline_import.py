# Rev 0.2.0

"""Timeline import service (Rev 0.2.0)
Fetch the timeline sheet, parse it fully in memory, then swap it into the
store inside a single transaction (delete events, delete tasks, reinsert).
A failure anywhere in the swap rolls back to the previous timeline.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from timelinez.errors import ConfigurationError
from timelinez.models.entities import TimelineSnapshot
from timelinez.repositories.db import Database
from timelinez.repositories.sqlite_event_repository import SQLiteEventRepository
from timelinez.repositories.sqlite_task_repository import SQLiteTaskRepository
from timelinez.services.grid_parser import parse_grid
from timelinez.sources.base import TabularSource
from timelinez.utils.config import DEFAULT_RANGE
from timelinez.utils.logging_setup import get_logger


@dataclass(frozen=True)
class ImportSummary:
    tasks_imported: int
    events_imported: int
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tasksImported": self.tasks_imported,
            "eventsImported": self.events_imported,
            "message": self.message,
        }


class TimelineImportService:
    def __init__(
        self,
        db: Database,
        source: TabularSource,
        *,
        sheet_id: Optional[str] = None,
        cell_range: str = DEFAULT_RANGE,
    ):
        self._db = db
        self._source = source
        self._sheet_id = sheet_id
        self._range = cell_range
        self._tasks = SQLiteTaskRepository(db)
        self._events = SQLiteEventRepository(db)
        self._log = get_logger("import")

    def import_timeline(self, sheet_id: Optional[str] = None, *, now: Optional[date] = None) -> ImportSummary:
        sheet_id = sheet_id or self._sheet_id
        if not sheet_id:
            raise ConfigurationError(
                "Timeline sheet ID not configured; set TIMELINEZ_SHEET_ID or timeline.sheet_id in settings.json"
            )
        self._log.info("Importing timeline from sheet %s range %s", sheet_id, self._range)
        rows = self._source.fetch_rows(sheet_id, self._range)
        snapshot = parse_grid(rows, now)
        self._log.info(
            "Parsed %d tasks with %d events over %d week columns",
            len(snapshot.tasks), snapshot.event_count, len(snapshot.week_dates),
        )
        return self.replace_all(snapshot)

    def replace_all(self, snapshot: TimelineSnapshot) -> ImportSummary:
        with self._db.transaction():
            cleared_events = self._events.delete_all()
            cleared_tasks = self._tasks.delete_all()
            self._log.debug("Cleared %d events and %d tasks", cleared_events, cleared_tasks)
            for draft in snapshot.tasks:
                task = self._tasks.insert_task(category=draft.category, task=draft.task, sort_order=draft.sort_order)
                for ev in draft.events:
                    self._events.insert_event(
                        task_id=task.id,
                        start_date=ev.start_date,
                        end_date=ev.end_date,
                        label=ev.label,
                        color=ev.color,
                    )
            tasks_n = self._tasks.count_tasks()
            events_n = self._events.count_events()
        message = f"Successfully imported {tasks_n} tasks with {events_n} events"
        self._log.info(message)
        return ImportSummary(tasks_imported=tasks_n, events_imported=events_n, message=message)
