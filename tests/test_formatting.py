"""Tests for formatting module."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from sheet_export._protocols.openpyxl import _create_workbook
from sheet_export.exporter import Exporter
from sheet_export.formatting import auto_size_columns, chain_formatters, no_formatting
from sheet_export.sheet import Sheet


def test_auto_size_columns_sets_widths() -> None:
    wb = _create_workbook()
    sheet = Sheet(wb.active, 0)
    sheet.write_data([["id", "a much longer description"], [1, "x"]])

    auto_size_columns()([sheet])

    dims = sheet.worksheet.column_dimensions
    assert dims["A"].width == 8.0
    assert dims["B"].width == float(len("a much longer description") + 2)


def test_auto_size_columns_caps_width() -> None:
    wb = _create_workbook()
    sheet = Sheet(wb.active, 0)
    sheet.write_data([["y" * 200]])

    auto_size_columns(max_width=30)([sheet])
    assert sheet.worksheet.column_dimensions["A"].width == 30.0


def test_auto_size_does_not_grow_sheet() -> None:
    wb = _create_workbook()
    sheet = Sheet(wb.active, 0)
    sheet.write_row(["a", "b"])

    auto_size_columns()([sheet])
    assert sheet.worksheet.max_row == 1


def test_auto_size_empty_sheet() -> None:
    wb = _create_workbook()
    sheet = Sheet(wb.active, 0)
    sheet.write_data([])
    auto_size_columns()([sheet])
    assert sheet.get_used_columns() == []


def test_no_formatting_leaves_sheet() -> None:
    wb = _create_workbook()
    sheet = Sheet(wb.active, 0)
    sheet.write_data([["a"]])
    no_formatting([sheet])
    assert sheet.worksheet["A1"].value == "a"


def test_chain_formatters_runs_in_order() -> None:
    calls: list[str] = []

    def _first(sheets: Sequence[Sheet]) -> None:
        calls.append(f"first:{len(sheets)}")

    def _second(sheets: Sequence[Sheet]) -> None:
        calls.append(f"second:{len(sheets)}")

    chain_formatters(_first, _second)([])
    assert calls == ["first:0", "second:0"]


def test_exporter_runs_auto_size(tmp_path: Path) -> None:
    exporter = Exporter(tmp_path, formatter=auto_size_columns())
    exporter.write_row(["header", "value"]).write_row(["row", "a long cell value here"])
    exporter.generate_file("sized.xlsx", disconnect=False)

    dims = exporter.get_sheet(0).worksheet.column_dimensions
    assert dims["B"].width == float(len("a long cell value here") + 2)
