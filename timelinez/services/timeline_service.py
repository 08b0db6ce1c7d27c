# Rev 0.2.0
"""CRUD surface for tasks, events and custom event types.

Each call is validated and persisted on its own; no run-length merging
happens here, so overlapping events on one task are kept as entered.
"""
from __future__ import annotations

from datetime import date
from typing import List, Optional, Union

from timelinez.errors import NotFound, ValidationError
from timelinez.models.entities import CustomEventType, Event, Task
from timelinez.repositories.db import Database
from timelinez.repositories.sqlite_event_repository import SQLiteEventRepository
from timelinez.repositories.sqlite_event_type_repository import SQLiteEventTypeRepository
from timelinez.repositories.sqlite_task_repository import SQLiteTaskRepository
from timelinez.services.event_colors import color_for_label
from timelinez.utils.logging_setup import get_logger

DateLike = Union[str, date]


def _iso_date(value: DateLike, field: str) -> str:
    if isinstance(value, date):
        return value.isoformat()
    try:
        return date.fromisoformat(str(value).strip()).isoformat()
    except ValueError:
        raise ValidationError(f"{field} must be an ISO date (YYYY-MM-DD), got {value!r}") from None


def _require_text(value: Optional[str], field: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field} is required")
    return value


class TimelineService:
    def __init__(self, db: Database):
        self._db = db
        self._tasks = SQLiteTaskRepository(db)
        self._events = SQLiteEventRepository(db)
        self._types = SQLiteEventTypeRepository(db)
        self._log = get_logger("timeline")

    # ---- tasks
    def create_task(self, category: str, task: str, sort_order: Optional[int] = None) -> Task:
        _require_text(category, "category")
        _require_text(task, "task")
        if sort_order is None:
            # append within the category; a new category goes after everything
            current = self._tasks.max_sort_order(category)
            if current is None:
                current = self._tasks.max_sort_order()
            sort_order = 0 if current is None else current + 1
        created = self._tasks.insert_task(category=category, task=task, sort_order=sort_order)
        self._log.info("Created task %d (%s / %s)", created.id, category, task)
        return created

    def update_task(
        self,
        task_id: int,
        *,
        category: Optional[str] = None,
        task: Optional[str] = None,
        sort_order: Optional[int] = None,
    ) -> Task:
        if category is not None:
            _require_text(category, "category")
        if task is not None:
            _require_text(task, "task")
        updated = self._tasks.update_task_fields(task_id, category=category, task=task, sort_order=sort_order)
        if updated is None:
            raise NotFound("task", task_id)
        return updated

    def delete_task(self, task_id: int) -> Task:
        """Delete a task and, first, every event it owns."""
        with self._db.transaction():
            existing = self._tasks.get_task(task_id)
            if existing is None:
                raise NotFound("task", task_id)
            removed = self._events.delete_for_task(task_id)
            self._tasks.delete_task(task_id)
        self._log.info("Deleted task %d with %d events", task_id, removed)
        return existing

    # ---- events
    def create_event(
        self,
        task_id: int,
        start_date: DateLike,
        end_date: Optional[DateLike] = None,
        label: Optional[str] = None,
        color: Optional[str] = None,
    ) -> Event:
        if start_date is None or start_date == "":
            raise ValidationError("start_date is required")
        if self._tasks.get_task(task_id) is None:
            raise NotFound("task", task_id)
        start = _iso_date(start_date, "start_date")
        end = _iso_date(end_date, "end_date") if end_date else start
        if end < start:
            raise ValidationError(f"end_date {end} is before start_date {start}")
        label = label or ""
        return self._events.insert_event(
            task_id=task_id,
            start_date=start,
            end_date=end,
            label=label,
            color=color or color_for_label(label),
        )

    def update_event(
        self,
        event_id: int,
        *,
        start_date: Optional[DateLike] = None,
        end_date: Optional[DateLike] = None,
        label: Optional[str] = None,
        color: Optional[str] = None,
    ) -> Event:
        existing = self._events.get_event(event_id)
        if existing is None:
            raise NotFound("event", event_id)
        start = _iso_date(start_date, "start_date") if start_date else None
        end = _iso_date(end_date, "end_date") if end_date else None
        if (end or existing.end_date) < (start or existing.start_date):
            raise ValidationError(
                f"end_date {end or existing.end_date} is before start_date {start or existing.start_date}"
            )
        if label is not None and label != existing.label and not color:
            color = color_for_label(label)
        updated = self._events.update_event_fields(
            event_id, start_date=start, end_date=end, label=label, color=color or None
        )
        if updated is None:
            raise NotFound("event", event_id)
        return updated

    def delete_event(self, event_id: int) -> Event:
        existing = self._events.get_event(event_id)
        if existing is None or self._events.delete_event(event_id) == 0:
            raise NotFound("event", event_id)
        return existing

    # ---- custom event types
    def list_event_types(self) -> List[CustomEventType]:
        return self._types.list_types()

    def create_event_type(self, label: str, color: str) -> CustomEventType:
        _require_text(label, "label")
        _require_text(color, "color")
        return self._types.insert_type(label=label, color=color)

    def update_event_type(
        self,
        type_id: int,
        *,
        label: Optional[str] = None,
        color: Optional[str] = None,
    ) -> CustomEventType:
        if label is not None:
            _require_text(label, "label")
        if color is not None:
            _require_text(color, "color")
        updated = self._types.update_type(type_id, label=label, color=color)
        if updated is None:
            raise NotFound("custom event type", type_id)
        return updated

    def delete_event_type(self, type_id: int) -> CustomEventType:
        existing = self._types.get_type(type_id)
        if existing is None or self._types.delete_type(type_id) == 0:
            raise NotFound("custom event type", type_id)
        return existing
