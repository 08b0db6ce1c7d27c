# tests/test_csv_source.py
from __future__ import annotations

import csv
from pathlib import Path

import pytest

from timelinez.errors import ConfigurationError, SourceDataError
from timelinez.sources.base import column_number, range_width
from timelinez.sources.csv_source import CsvSheetSource


@pytest.mark.parametrize("letters,n", [("A", 1), ("Z", 26), ("AA", 27), ("AB", 28), ("ab", 28)])
def test_column_number(letters, n):
    assert column_number(letters) == n


@pytest.mark.parametrize(
    "cell_range,width",
    [("'Timeline'!A:AB", 28), ("Timeline!A1:C10", 3), ("A:E", 5), ("'Timeline'", None)],
)
def test_range_width(cell_range, width):
    assert range_width(cell_range) == width


def test_fetch_rows_reads_and_trims(tmp_path: Path):
    (tmp_path / "abc.csv").write_text(
        "Category,Task,Nov 14,Nov 21,Extra\n Flooring ,Install carpet,Begins,,x\n",
        encoding="utf-8",
    )
    rows = CsvSheetSource(tmp_path).fetch_rows("abc", "'Timeline'!A:D")
    assert rows == [
        ["Category", "Task", "Nov 14", "Nov 21"],
        ["Flooring", "Install carpet", "Begins", ""],
    ]


def test_fetch_rows_handles_utf8_bom(tmp_path: Path):
    (tmp_path / "bom.csv").write_bytes("\ufeffCategory,Task\n".encode("utf-8"))
    assert CsvSheetSource(tmp_path).fetch_rows("bom", "'Timeline'!A:AB")[0][0] == "Category"


def test_missing_export_is_source_data_error(tmp_path: Path):
    with pytest.raises(SourceDataError):
        CsvSheetSource(tmp_path).fetch_rows("nope", "'Timeline'!A:AB")


def test_non_utf8_export_is_source_data_error(tmp_path: Path):
    (tmp_path / "excel.csv").write_bytes("Category,Task,Nov 14\nCafé,Floor,Begins\n".encode("cp1252"))
    with pytest.raises(SourceDataError, match="Unreadable CSV export"):
        CsvSheetSource(tmp_path).fetch_rows("excel", "'Timeline'!A:AB")


def test_oversized_field_is_source_data_error(tmp_path: Path):
    huge = "x" * (csv.field_size_limit() + 1)
    (tmp_path / "big.csv").write_text(f"Category,Task\nFlooring,\"{huge}\"\n", encoding="utf-8")
    with pytest.raises(SourceDataError):
        CsvSheetSource(tmp_path).fetch_rows("big", "'Timeline'!A:AB")


@pytest.mark.parametrize("sheet_id", ["../outside", "sub/sheet", "..\\outside", "..", ""])
def test_sheet_id_must_not_escape_source_dir(tmp_path: Path, sheet_id):
    root = tmp_path / "sheets"
    root.mkdir()
    (tmp_path / "outside.csv").write_text("Category,Task\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        CsvSheetSource(root).fetch_rows(sheet_id, "'Timeline'!A:AB")
