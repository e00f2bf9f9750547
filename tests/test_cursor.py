"""Tests for cursor module."""

from __future__ import annotations

from sheet_export.cursor import Cursor


def test_initial_state() -> None:
    cursor = Cursor()
    assert cursor.current_column == "A"
    assert cursor.current_row == 1
    assert cursor.max_column == "A"
    assert cursor.max_row == 1
    assert cursor.coordinate == "A1"


def test_advance_column_grows_max() -> None:
    cursor = Cursor()
    cursor.advance_column()
    cursor.advance_column()
    assert cursor.current_column == "C"
    assert cursor.max_column == "C"
    assert cursor.coordinate == "C1"


def test_advance_column_past_z() -> None:
    cursor = Cursor()
    for _ in range(26):
        cursor.advance_column()
    assert cursor.current_column == "AA"
    assert cursor.max_column == "AA"


def test_advance_row_resets_column() -> None:
    cursor = Cursor()
    cursor.advance_column()
    cursor.advance_row()
    assert cursor.current_row == 2
    assert cursor.max_row == 2
    assert cursor.current_column == "A"
    assert cursor.max_column == "B"


def test_advance_row_keeps_column() -> None:
    cursor = Cursor()
    cursor.advance_column()
    cursor.advance_row(reset_column=False)
    assert cursor.current_column == "B"
    assert cursor.current_row == 2


def test_max_never_shrinks_on_shorter_rows() -> None:
    cursor = Cursor()
    for _ in range(30):
        cursor.advance_column()
    cursor.advance_row()
    cursor.advance_column()
    assert cursor.max_column == "AE"


def test_reset_keeps_bounds() -> None:
    cursor = Cursor()
    cursor.advance_column()
    cursor.advance_row()
    cursor.advance_row()
    cursor.reset()
    assert cursor.coordinate == "A1"
    assert cursor.max_column == "B"
    assert cursor.max_row == 3


def test_reset_with_bounds() -> None:
    cursor = Cursor()
    cursor.advance_column()
    cursor.advance_row()
    cursor.reset(reset_bounds=True)
    assert cursor.max_column == "A"
    assert cursor.max_row == 1


def test_setters_stamp_bounds() -> None:
    cursor = Cursor()
    cursor.set_max_row(0)
    cursor.set_max_column("")
    assert cursor.max_row == 0
    assert cursor.max_column == ""
