# Rev 0.2.0
"""Timeline read model: the query-time structure the grid UI draws from.

Nothing here writes to the store. The week axis is rebuilt on every read
from the live event dates; only an empty store falls back to a generated
weekly sequence so the UI has a grid to render.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Sequence

from timelinez.models.entities import Event, Task
from timelinez.repositories.db import Database
from timelinez.repositories.sqlite_event_repository import SQLiteEventRepository
from timelinez.repositories.sqlite_task_repository import SQLiteTaskRepository
from timelinez.services.header_dates import fiscal_start_year

# Empty-state grid: Nov 14 of the fiscal start year through May 8, weekly.
FALLBACK_START = (11, 14)
FALLBACK_END = (5, 8)


def fallback_week_dates(now: Optional[date] = None) -> List[str]:
    start_year = fiscal_start_year(now or date.today())
    day = date(start_year, *FALLBACK_START)
    last = date(start_year + 1, *FALLBACK_END)
    out: List[str] = []
    while day <= last:
        out.append(day.isoformat())
        day += timedelta(days=7)
    return out


def week_axis(events: Sequence[Event], now: Optional[date] = None) -> List[str]:
    dates = {e.start_date for e in events} | {e.end_date for e in events}
    return sorted(dates) if dates else fallback_week_dates(now)


@dataclass
class TimelineView:
    tasks: List[Task]
    events: List[Event]
    events_by_task: Dict[int, List[Event]]
    categories: Dict[str, List[Task]]
    week_dates: List[str]
    last_updated: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tasks": [t.to_dict() for t in self.tasks],
            "events": [e.to_dict() for e in self.events],
            "eventsByTask": {tid: [e.to_dict() for e in evs] for tid, evs in self.events_by_task.items()},
            "categories": {name: [t.to_dict() for t in ts] for name, ts in self.categories.items()},
            "weekDates": list(self.week_dates),
            "lastUpdated": self.last_updated,
        }


class TimelineReadModel:
    def __init__(self, db: Database):
        self._tasks = SQLiteTaskRepository(db)
        self._events = SQLiteEventRepository(db)

    def load(self, now: Optional[date] = None) -> TimelineView:
        tasks = self._tasks.list_tasks()
        events = self._events.list_events()

        # tasks arrive ordered by sort_order, so categories keep first-seen order
        categories: Dict[str, List[Task]] = {}
        for t in tasks:
            categories.setdefault(t.category, []).append(t)

        events_by_task: Dict[int, List[Event]] = {}
        for e in events:
            events_by_task.setdefault(e.task_id, []).append(e)

        return TimelineView(
            tasks=tasks,
            events=events,
            events_by_task=events_by_task,
            categories=categories,
            week_dates=week_axis(events, now),
        )
