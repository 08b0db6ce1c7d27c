# Rev 0.2.0
"""Resolve two-part week headers ("Nov 14", "11/14") to ISO dates.

The timeline spans a fiscal year that starts in November: Nov-Dec belong
to the start year and Jan-Oct to start year + 1. The start year itself is
derived from a reference "now", so the same header resolves consistently
whichever half of the fiscal year the import runs in.
"""
from __future__ import annotations

import re
from datetime import date
from typing import List, Optional, Sequence, Tuple

from timelinez.utils.logging_setup import get_logger

_log = get_logger("header_dates")

_MONTHS = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)
_NAMED = re.compile(r"^([A-Za-z]{3,})\.?\s+(\d{1,2})$")
_NUMERIC = re.compile(r"^(\d{1,2})/(\d{1,2})$")

FISCAL_START_MONTH = 11

# Columns 0/1 hold category/task; up to 26 weekly columns follow (C..AB).
FIRST_WEEK_COLUMN = 2
LAST_WEEK_COLUMN = 27


def fiscal_start_year(now: date) -> int:
    return now.year if now.month >= FISCAL_START_MONTH else now.year - 1


def year_for_month(month: int, now: date) -> int:
    start = fiscal_start_year(now)
    return start if month >= FISCAL_START_MONTH else start + 1


def _month_from_name(token: str) -> Optional[int]:
    token = token.lower()
    for number, name in enumerate(_MONTHS, start=1):
        if name.startswith(token):
            return number
    return None


def resolve_header(text: object, now: Optional[date] = None) -> Optional[str]:
    """Return 'YYYY-MM-DD' for a week header, or None when it does not parse."""
    s = str(text or "").strip()
    if not s:
        return None
    now = now or date.today()

    month: Optional[int] = None
    day: Optional[int] = None
    m = _NAMED.match(s)
    if m:
        month = _month_from_name(m.group(1))
        day = int(m.group(2))
    else:
        m = _NUMERIC.match(s)
        if m:
            month, day = int(m.group(1)), int(m.group(2))
    if month is None or day is None or not 1 <= month <= 12:
        return None

    try:
        return date(year_for_month(month, now), month, day).isoformat()
    except ValueError:
        # e.g. "Feb 30"
        return None


def resolve_week_columns(header_row: Sequence[object], now: Optional[date] = None) -> List[Tuple[int, str]]:
    """(column index, ISO date) for every resolvable week header, left to right."""
    now = now or date.today()
    columns: List[Tuple[int, str]] = []
    for idx in range(FIRST_WEEK_COLUMN, min(len(header_row), LAST_WEEK_COLUMN + 1)):
        resolved = resolve_header(header_row[idx], now)
        if resolved is None:
            _log.debug("Skipping header column %d: %r", idx, header_row[idx])
            continue
        columns.append((idx, resolved))
    return columns
