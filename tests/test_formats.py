"""Tests for formats module."""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path

import pytest

from sheet_export._exceptions import SerializationError
from sheet_export._protocols.openpyxl import _create_workbook, _load_workbook
from sheet_export.formats import (
    format_info,
    require_writer,
    resolve_format,
    save_workbook,
    supported_formats,
)


@pytest.mark.parametrize(
    ("alias", "canonical"),
    [
        ("Excel2007", "Xlsx"),
        ("Excel5", "Xls"),
        ("Excel2003XML", "Xml"),
        ("CSV", "Csv"),
        ("OOCalc", "Ods"),
        ("HTML", "Html"),
        ("PDF", "Pdf"),
    ],
)
def test_resolve_legacy_alias(alias: str, canonical: str) -> None:
    assert resolve_format(alias) == canonical


def test_resolve_unknown_passes_through() -> None:
    assert resolve_format("Xlsx") == "Xlsx"
    assert resolve_format("Tsv") == "Tsv"


def test_format_info_known() -> None:
    info = format_info("Excel2007")
    assert info["name"] == "Xlsx"
    assert info["extension"] == "xlsx"


def test_format_info_unknown() -> None:
    info = format_info("Tsv")
    assert info["name"] == "Tsv"
    assert info["extension"] == "tsv"
    assert info["content_type"] == "application/octet-stream"


def test_supported_formats() -> None:
    assert supported_formats() == ["Csv", "Xlsx"]


def test_save_xlsx(tmp_path: Path) -> None:
    wb = _create_workbook()
    wb.active["A1"].value = "hello"
    out_path = tmp_path / "out.xlsx"
    save_workbook(wb, out_path, "Xlsx")

    loaded = _load_workbook(out_path)
    assert loaded.active["A1"].value == "hello"
    loaded.close()


def test_save_csv_renders_values(tmp_path: Path) -> None:
    wb = _create_workbook()
    ws = wb.active
    ws["A1"].value = "name, with comma"
    ws["B1"].value = True
    ws["C1"].value = 1.5
    ws["A2"].value = date(2024, 1, 31)
    ws["B2"].value = datetime(2024, 1, 31, 8, 30)
    out_path = tmp_path / "out.csv"
    save_workbook(wb, out_path, "Csv")

    lines = out_path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == '"name, with comma",TRUE,1.5'
    assert lines[1].split(",")[0] == "2024-01-31"
    assert lines[1].split(",")[1] == "2024-01-31T08:30:00"


def test_save_csv_empty_sheet(tmp_path: Path) -> None:
    wb = _create_workbook()
    out_path = tmp_path / "empty.csv"
    save_workbook(wb, out_path, "Csv")
    assert out_path.read_text(encoding="utf-8") == ""


def test_save_csv_only_first_sheet(tmp_path: Path) -> None:
    wb = _create_workbook()
    wb.active["A1"].value = "first"
    second = wb.create_sheet("Other")
    second["A1"].value = "second"
    out_path = tmp_path / "out.csv"
    save_workbook(wb, out_path, "CSV")
    assert out_path.read_text(encoding="utf-8") == "first\n"


def test_save_unknown_format_raises(tmp_path: Path) -> None:
    wb = _create_workbook()
    out_path = tmp_path / "out.pdf"
    with pytest.raises(SerializationError) as exc_info:
        save_workbook(wb, out_path, "PDF")
    assert exc_info.value.path == str(out_path)
    assert "Pdf" in exc_info.value.message
    assert not out_path.exists()


def test_save_to_missing_directory_raises(tmp_path: Path) -> None:
    wb = _create_workbook()
    with pytest.raises(SerializationError):
        save_workbook(wb, tmp_path / "nope" / "out.csv", "Csv")


def test_require_writer(tmp_path: Path) -> None:
    out_path = tmp_path / "out.ods"
    assert require_writer("CSV", out_path) is require_writer("Csv", out_path)
    with pytest.raises(SerializationError) as exc_info:
        require_writer("OOCalc", out_path)
    assert exc_info.value.path == str(out_path)
    assert "Ods" in exc_info.value.message
