# Rev 0.2.0
"""Turn the raw timeline sheet (rows of cells) into an in-memory snapshot.

Row interpretation:
  - category + task            -> normal task
  - category only, week cells  -> milestone row; category doubles as task name
  - category only, no cells    -> section header; sets the current category
  - task only                  -> inherits the nearest preceding category
  - neither                    -> skipped
"""
from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence

from timelinez.errors import SourceDataError
from timelinez.models.entities import TaskDraft, TimelineSnapshot
from timelinez.services.header_dates import resolve_week_columns
from timelinez.services.run_length import build_events
from timelinez.utils.logging_setup import get_logger

_log = get_logger("grid_parser")


def _cell(row: Sequence[object], idx: int) -> str:
    if idx >= len(row) or row[idx] is None:
        return ""
    return str(row[idx]).strip()


def parse_grid(rows: Sequence[Sequence[object]], now: Optional[date] = None) -> TimelineSnapshot:
    if not rows or len(rows) < 2:
        raise SourceDataError(
            f"Timeline sheet needs a header row and at least one data row (got {len(rows or [])} rows)"
        )

    week_columns = resolve_week_columns(rows[0], now)
    _log.info("Parsed %d week columns: %s", len(week_columns), [d for _, d in week_columns])

    snapshot = TimelineSnapshot(week_dates=[d for _, d in week_columns])
    current_category: Optional[str] = None
    sort_order = 0

    for line_no, row in enumerate(rows[1:], start=2):
        category = _cell(row, 0)
        task = _cell(row, 1)
        cells = [(day, _cell(row, idx)) for idx, day in week_columns]
        has_cells = any(text for _, text in cells)

        if not category and not task:
            continue
        if category:
            current_category = category
            if not task:
                if not has_cells:
                    continue
                task = category
        elif current_category is None:
            _log.warning("Row %d: task %r has no category above it; dropped", line_no, task)
            continue
        else:
            category = current_category

        snapshot.tasks.append(
            TaskDraft(
                category=category,
                task=task,
                sort_order=sort_order,
                events=list(build_events(cells)),
            )
        )
        sort_order += 1

    return snapshot
