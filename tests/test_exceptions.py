"""Tests for _exceptions module."""

from __future__ import annotations

from sheet_export._exceptions import (
    DisconnectedError,
    InvalidSheetIndexError,
    NotGeneratedError,
    SerializationError,
    SheetExportError,
)


def test_sheet_export_error_message() -> None:
    err = SheetExportError("test error")
    assert str(err) == "test error"


def test_invalid_sheet_index_error() -> None:
    err = InvalidSheetIndexError(4)
    assert err.index == 4
    assert str(err) == "No sheet with index 4 defined"
    assert isinstance(err, SheetExportError)


def test_serialization_error() -> None:
    err = SerializationError("/tmp/out.ods", "No writer for format 'Ods'")
    assert err.path == "/tmp/out.ods"
    assert err.message == "No writer for format 'Ods'"
    assert "/tmp/out.ods" in str(err)
    assert isinstance(err, SheetExportError)


def test_disconnected_error() -> None:
    err = DisconnectedError("generate file")
    assert err.operation == "generate file"
    assert "generate file" in str(err)
    assert isinstance(err, SheetExportError)


def test_not_generated_error() -> None:
    err = NotGeneratedError("file_path")
    assert err.attribute == "file_path"
    assert "file_path" in str(err)
