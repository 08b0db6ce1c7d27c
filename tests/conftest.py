# Rev 0.2.0

"""Pytest fixtures for timelineZ (Rev 0.2.0)"""
from __future__ import annotations
from pathlib import Path
from typing import Dict, List

import pytest
from PySide6.QtCore import QCoreApplication

from timelinez.app_context import AppContext
from timelinez.repositories.db import Database
from timelinez.services.timeline_import import TimelineImportService


HEADER = ["Category", "Task", "Nov 14", "Nov 21", "Nov 28", "Dec 5", "Jan 2"]

SAMPLE_GRID: List[List[str]] = [
    HEADER,
    ["Flooring", "", "", "", "", "", ""],
    ["", "Install carpet", "Begins", "Begins", "Complete", "", ""],
    ["", "Tile bathrooms", "", "Installation", "Installation", "Installation", ""],
    ["Containers", "Container 1", "Departs", "", "", "Arrive", ""],
    ["FINISHES", "", "", "", "", "", "Complete"],
]


class StubSource:
    """In-memory tabular source keyed by sheet id."""

    def __init__(self, sheets: Dict[str, List[List[str]]] | None = None):
        self.sheets = dict(sheets or {})
        self.calls: List[tuple] = []

    def fetch_rows(self, sheet_id: str, cell_range: str) -> List[List[str]]:
        self.calls.append((sheet_id, cell_range))
        return [list(r) for r in self.sheets.get(sheet_id, [])]


@pytest.fixture()
def db(tmp_path: Path):
    database = Database(path=tmp_path / "test.db")
    try:
        database.run_migrations()
        yield database
    finally:
        database.close()


@pytest.fixture()
def db_conn(db: Database):
    return db.conn


@pytest.fixture()
def source() -> StubSource:
    return StubSource({"sheet-1": SAMPLE_GRID})


@pytest.fixture()
def importer(db: Database, source: StubSource) -> TimelineImportService:
    return TimelineImportService(db, source, sheet_id="sheet-1")


@pytest.fixture()
def ctx(tmp_path: Path, source: StubSource):
    settings = {
        "timeline": {"sheet_id": "sheet-1", "range": "'Timeline'!A:AB", "source_dir": str(tmp_path / "sheets")},
        "database": {"path": str(tmp_path / "ctx.db")},
    }
    context = AppContext.create(settings, source=source)
    try:
        yield context
    finally:
        context.close()


@pytest.fixture(scope="session")
def qt_core_app():
    return QCoreApplication.instance() or QCoreApplication([])
