# Rev 0.2.1
"""Tabular source backed by CSV exports of the timeline sheet.

Each sheet id maps to `<root_dir>/<sheet_id>.csv` (File > Download > CSV of
the Timeline tab). Ranges are honoured by width only, counted from column A.
"""
from __future__ import annotations

import csv
from pathlib import Path

from timelinez.errors import ConfigurationError, SourceDataError
from timelinez.sources.base import Rows, range_width
from timelinez.utils.logging_setup import get_logger


class CsvSheetSource:
    def __init__(self, root_dir: Path | str):
        self.root_dir = Path(root_dir)
        self._log = get_logger("csv_source")

    def path_for(self, sheet_id: str) -> Path:
        # A sheet id names one file directly inside root_dir
        if not sheet_id or sheet_id in (".", "..") or "/" in sheet_id or "\\" in sheet_id:
            raise ConfigurationError(f"Invalid sheet id {sheet_id!r}: must be a plain file name")
        return self.root_dir / f"{sheet_id}.csv"

    def fetch_rows(self, sheet_id: str, cell_range: str) -> Rows:
        path = self.path_for(sheet_id)
        if not path.is_file():
            raise SourceDataError(f"No CSV export for sheet {sheet_id!r} at {path}")
        width = range_width(cell_range)
        try:
            with path.open("r", encoding="utf-8-sig", newline="") as f:
                rows = [[cell.strip() for cell in row] for row in csv.reader(f)]
        except (UnicodeDecodeError, csv.Error) as exc:
            raise SourceDataError(f"Unreadable CSV export {path}: {exc}") from exc
        if width is not None:
            rows = [row[:width] for row in rows]
        self._log.info("Read %d rows from %s", len(rows), path)
        return rows
