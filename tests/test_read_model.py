# tests/test_read_model.py
from __future__ import annotations

from datetime import date, timedelta

import pytest

from timelinez.services.read_model import TimelineReadModel, fallback_week_dates
from timelinez.services.timeline_service import TimelineService

FEB_2025 = date(2025, 2, 10)


@pytest.fixture()
def model(db) -> TimelineReadModel:
    return TimelineReadModel(db)


@pytest.fixture()
def svc(db) -> TimelineService:
    return TimelineService(db)


def test_fallback_axis_matches_nov14_to_may8():
    weeks = fallback_week_dates(FEB_2025)
    assert weeks[0] == "2024-11-14"
    assert weeks[-1] == "2025-05-08"
    assert len(weeks) == 26
    steps = {date.fromisoformat(b) - date.fromisoformat(a) for a, b in zip(weeks, weeks[1:])}
    assert steps == {timedelta(days=7)}


def test_fallback_axis_follows_fiscal_start_year():
    weeks = fallback_week_dates(date(2025, 11, 20))
    assert weeks[0] == "2025-11-14"
    assert weeks[-1] <= "2026-05-08"


def test_empty_store_uses_fallback_axis(model):
    view = model.load(FEB_2025)
    assert view.tasks == [] and view.events == []
    assert view.week_dates == fallback_week_dates(FEB_2025)


def test_week_axis_is_sorted_union_of_event_dates(model, svc):
    a = svc.create_task("Flooring", "Carpet")
    b = svc.create_task("Paint", "Walls")
    svc.create_event(a.id, "2025-01-09", "2025-01-23")
    svc.create_event(a.id, "2024-12-05")
    svc.create_event(b.id, "2025-01-09", "2025-03-06")
    view = model.load(FEB_2025)
    assert view.week_dates == ["2024-12-05", "2025-01-09", "2025-01-23", "2025-03-06"]


def test_grouping_by_category_and_task(model, svc):
    carpet = svc.create_task("Flooring", "Carpet", sort_order=1)
    tile = svc.create_task("Flooring", "Tile", sort_order=0)
    walls = svc.create_task("Paint", "Walls", sort_order=2)
    e1 = svc.create_event(carpet.id, "2025-01-09")
    e2 = svc.create_event(carpet.id, "2025-01-02")

    view = model.load(FEB_2025)
    assert list(view.categories) == ["Flooring", "Paint"]
    assert [t.id for t in view.categories["Flooring"]] == [tile.id, carpet.id]
    assert [e.id for e in view.events_by_task[carpet.id]] == [e2.id, e1.id]
    assert tile.id not in view.events_by_task
    assert walls.id not in view.events_by_task


def test_to_dict_shape(model, svc):
    t = svc.create_task("Flooring", "Carpet")
    svc.create_event(t.id, "2025-01-02", label="Begins")
    data = model.load(FEB_2025).to_dict()
    assert set(data) == {"tasks", "events", "eventsByTask", "categories", "weekDates", "lastUpdated"}
    assert data["tasks"][0]["sortOrder"] == 0
    assert data["eventsByTask"][t.id][0]["startDate"] == "2025-01-02"
    assert data["categories"]["Flooring"][0]["task"] == "Carpet"


def test_deleted_task_disappears_from_read_model(model, svc):
    t = svc.create_task("Flooring", "Carpet")
    keep = svc.create_task("Flooring", "Tile")
    for d in ("2025-01-02", "2025-01-09", "2025-01-16"):
        svc.create_event(t.id, d)
    svc.delete_task(t.id)

    view = model.load(FEB_2025)
    assert [x.id for x in view.categories["Flooring"]] == [keep.id]
    assert t.id not in view.events_by_task
    assert view.events == []
    assert view.week_dates == fallback_week_dates(FEB_2025)


def test_read_does_not_mutate_store(model, svc, db):
    t = svc.create_task("Flooring", "Carpet")
    svc.create_event(t.id, "2025-01-02")
    before = db.conn.execute("SELECT * FROM tasks").fetchall(), db.conn.execute("SELECT * FROM events").fetchall()
    model.load(FEB_2025)
    model.load(FEB_2025)
    after = db.conn.execute("SELECT * FROM tasks").fetchall(), db.conn.execute("SELECT * FROM events").fetchall()
    assert [list(map(tuple, x)) for x in before] == [list(map(tuple, x)) for x in after]


def test_import_then_read_round_trip(importer, model):
    importer.import_timeline(now=FEB_2025)
    view = model.load(FEB_2025)
    assert list(view.categories) == ["Flooring", "Containers", "FINISHES"]
    assert view.week_dates == ["2024-11-14", "2024-11-21", "2024-11-28", "2024-12-05", "2025-01-02"]
