# Rev 0.2.0
"""Timeline entities aligned with migration 0001_timeline_schema"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Task:
    id: int | None
    category: str
    task: str
    sort_order: int = 0
    created_at_utc: Optional[str] = None
    updated_at_utc: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "category": self.category,
            "task": self.task,
            "sortOrder": self.sort_order,
            "createdAt": self.created_at_utc,
            "updatedAt": self.updated_at_utc,
        }


@dataclass
class Event:
    id: int | None
    task_id: int
    start_date: str            # YYYY-MM-DD
    end_date: str              # inclusive; == start_date for single-day events
    label: str = ""
    color: str = ""
    created_at_utc: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "taskId": self.task_id,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "label": self.label,
            "color": self.color,
            "createdAt": self.created_at_utc,
        }


@dataclass
class CustomEventType:
    id: int | None
    label: str
    color: str
    created_at_utc: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "color": self.color,
            "createdAt": self.created_at_utc,
        }


# --- import snapshot ---------------------------------------------------------

@dataclass(frozen=True)
class EventDraft:
    """An event built by the importer, not yet bound to a task id."""
    label: str
    start_date: str
    end_date: str
    color: str


@dataclass
class TaskDraft:
    category: str
    task: str
    sort_order: int
    events: List[EventDraft] = field(default_factory=list)


@dataclass
class TimelineSnapshot:
    """A fully parsed import, built in memory before touching the store."""
    week_dates: List[str]
    tasks: List[TaskDraft] = field(default_factory=list)

    @property
    def event_count(self) -> int:
        return sum(len(t.events) for t in self.tasks)
