# Rev 0.2.0
from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

from PySide6.QtCore import QObject, Signal

from timelinez.app_context import AppContext
from timelinez.errors import TimelineError
from timelinez.utils.logging_setup import get_logger

T = TypeVar("T")


class TimelineViewModel(QObject):
    """
    Exposes the timeline read model and commands to a Qt UI.
    Every successful command re-emits timelineLoaded with a fresh read.
    """

    timelineLoaded = Signal(object)
    importFinished = Signal(object)
    failed = Signal(str)

    def __init__(self, ctx: AppContext):
        super().__init__()
        self._ctx = ctx
        self._log = get_logger("TimelineViewModel")

    # ---- queries
    def reload(self) -> dict:
        view = self._ctx.read_model.load().to_dict()
        self.timelineLoaded.emit(view)
        return view

    # ---- import
    def import_timeline(self, sheet_id: Optional[str] = None) -> Optional[dict]:
        summary = self._run(lambda: self._ctx.importer.import_timeline(sheet_id))
        if summary is None:
            return None
        payload = summary.to_dict()
        self.importFinished.emit(payload)
        return payload

    # ---- tasks
    def create_task(self, category: str, task: str, sort_order: Optional[int] = None) -> Optional[dict]:
        return self._run_dict(lambda: self._ctx.timeline.create_task(category, task, sort_order))

    def update_task(self, task_id: int, **fields: Any) -> Optional[dict]:
        return self._run_dict(lambda: self._ctx.timeline.update_task(task_id, **fields))

    def delete_task(self, task_id: int) -> Optional[dict]:
        return self._run_dict(lambda: self._ctx.timeline.delete_task(task_id))

    # ---- events
    def create_event(self, task_id: int, start_date: str, end_date: Optional[str] = None,
                     label: Optional[str] = None, color: Optional[str] = None) -> Optional[dict]:
        return self._run_dict(lambda: self._ctx.timeline.create_event(task_id, start_date, end_date, label, color))

    def update_event(self, event_id: int, **fields: Any) -> Optional[dict]:
        return self._run_dict(lambda: self._ctx.timeline.update_event(event_id, **fields))

    def delete_event(self, event_id: int) -> Optional[dict]:
        return self._run_dict(lambda: self._ctx.timeline.delete_event(event_id))

    # ---- categories
    def rename_category(self, old: str, new: str) -> Optional[int]:
        return self._run(lambda: self._ctx.categories.rename(old, new))

    def delete_category(self, name: str) -> Optional[int]:
        return self._run(lambda: self._ctx.categories.delete(name))

    # ---- custom event types (presets; no timeline reload needed)
    def list_event_types(self) -> list[dict]:
        return [t.to_dict() for t in self._ctx.timeline.list_event_types()]

    def create_event_type(self, label: str, color: str) -> Optional[dict]:
        return self._run_dict(lambda: self._ctx.timeline.create_event_type(label, color), reload=False)

    def update_event_type(self, type_id: int, **fields: Any) -> Optional[dict]:
        return self._run_dict(lambda: self._ctx.timeline.update_event_type(type_id, **fields), reload=False)

    def delete_event_type(self, type_id: int) -> Optional[dict]:
        return self._run_dict(lambda: self._ctx.timeline.delete_event_type(type_id), reload=False)

    # ---- internals
    def _run(self, fn: Callable[[], T], *, reload: bool = True) -> Optional[T]:
        try:
            result = fn()
        except TimelineError as exc:
            self._log.warning("%s: %s", type(exc).__name__, exc)
            self.failed.emit(str(exc))
            return None
        if reload:
            self.reload()
        return result

    def _run_dict(self, fn: Callable[[], Any], *, reload: bool = True) -> Optional[dict]:
        result = self._run(fn, reload=reload)
        return result.to_dict() if result is not None else None
