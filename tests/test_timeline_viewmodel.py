# tests/test_timeline_viewmodel.py
from __future__ import annotations

import pytest

from timelinez.viewmodels.timeline_viewmodel import TimelineViewModel


@pytest.fixture()
def vm(ctx, qt_core_app):
    model = TimelineViewModel(ctx)
    model.loaded, model.imported, model.errors = [], [], []
    model.timelineLoaded.connect(model.loaded.append)
    model.importFinished.connect(model.imported.append)
    model.failed.connect(model.errors.append)
    return model


def test_import_emits_summary_and_fresh_timeline(vm):
    payload = vm.import_timeline()
    assert payload["tasksImported"] == 4
    assert vm.imported == [payload]
    assert len(vm.loaded[-1]["tasks"]) == 4
    assert vm.errors == []


def test_crud_commands_reload_timeline(vm):
    task = vm.create_task("Flooring", "Carpet")
    ev = vm.create_event(task["id"], "2025-01-02", label="Begins")
    assert ev["color"] == "#93c5fd"
    view = vm.loaded[-1]
    assert view["eventsByTask"][task["id"]][0]["id"] == ev["id"]

    vm.update_event(ev["id"], label="Complete")
    assert vm.loaded[-1]["events"][0]["label"] == "Complete"

    vm.delete_task(task["id"])
    assert vm.loaded[-1]["tasks"] == []
    assert task["id"] not in vm.loaded[-1]["eventsByTask"]


def test_not_found_is_reported_through_failed_signal(vm):
    assert vm.delete_event(404) is None
    assert vm.rename_category("Ghost", "Other") is None
    assert len(vm.errors) == 2
    assert "404" in vm.errors[0]
    assert vm.loaded == []


def test_category_commands(vm):
    vm.import_timeline()
    assert vm.rename_category("Flooring", "Floors") == 2
    assert "Floors" in vm.loaded[-1]["categories"]
    assert vm.delete_category("Floors") == 2
    assert "Floors" not in vm.loaded[-1]["categories"]


def test_event_type_presets_do_not_reload(vm):
    et = vm.create_event_type("Inspection", "#f87171")
    assert vm.list_event_types() == [et]
    assert vm.update_event_type(et["id"], color="#000000")["color"] == "#000000"
    assert vm.delete_event_type(et["id"])["id"] == et["id"]
    assert vm.loaded == []
