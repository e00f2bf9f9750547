"""Common type definitions for sheet_export library.

Provides the cell, row and buffer aliases shared by the sheet and exporter
modules.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime

# Scalar values accepted by a worksheet cell
CellValue = str | int | float | bool | datetime | date | None

# One row of values, written left to right starting at column A
RowValues = Sequence[CellValue]

# A 2-D block of rows, written top to bottom starting at row 1
RowData = Sequence[RowValues]

# Pending rows per sheet index, kept in append order
RowBuffer = dict[int, list[list[CellValue]]]


__all__ = [
    "CellValue",
    "RowBuffer",
    "RowData",
    "RowValues",
]
