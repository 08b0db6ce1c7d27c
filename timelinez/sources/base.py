# Rev 0.2.0
from __future__ import annotations

import re
from typing import List, Optional, Protocol

Rows = List[List[str]]

_RANGE_END = re.compile(r"!?[A-Za-z]+\d*:([A-Za-z]+)\d*$")


class TabularSource(Protocol):
    """Anything that can hand back a sheet range as rows of string cells."""

    def fetch_rows(self, sheet_id: str, cell_range: str) -> Rows: ...


def column_number(letters: str) -> int:
    """Spreadsheet column letters to a 1-based number ('A' -> 1, 'AB' -> 28)."""
    n = 0
    for ch in letters.upper():
        n = n * 26 + (ord(ch) - ord("A") + 1)
    return n


def range_width(cell_range: str) -> Optional[int]:
    """Number of columns covered by an A1 range like "'Timeline'!A:AB" (None if open)."""
    m = _RANGE_END.search(cell_range.strip())
    return column_number(m.group(1)) if m else None
