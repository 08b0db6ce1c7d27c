# Rev 0.2.0
"""Collapse a task row's week cells into date-ranged events."""
from __future__ import annotations

from typing import Iterable, Iterator, Optional, Tuple

from timelinez.models.entities import EventDraft
from timelinez.services.event_colors import color_for_label


def build_events(
    cells: Iterable[Tuple[str, object]],
    color: Optional[str] = None,
) -> Iterator[EventDraft]:
    """Yield one EventDraft per maximal run of identical non-empty labels.

    `cells` is (iso_date, raw text) in column order, which is chronological.
    An empty cell always breaks a run. `color` overrides the label mapping.
    """
    run: Optional[Tuple[str, str, str]] = None  # (label, start, end)

    def _emit(r: Tuple[str, str, str]) -> EventDraft:
        label, start, end = r
        return EventDraft(label=label, start_date=start, end_date=end, color=color or color_for_label(label))

    for day, raw in cells:
        label = str(raw if raw is not None else "").strip()
        if not label:
            if run is not None:
                yield _emit(run)
                run = None
        elif run is not None and run[0] == label:
            run = (label, run[1], day)
        else:
            if run is not None:
                yield _emit(run)
            run = (label, day, day)

    if run is not None:
        yield _emit(run)
