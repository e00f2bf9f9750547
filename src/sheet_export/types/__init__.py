"""Type definitions for sheet_export library."""

from __future__ import annotations

from sheet_export.types.common import CellValue, RowBuffer, RowData, RowValues

__all__ = [
    "CellValue",
    "RowBuffer",
    "RowData",
    "RowValues",
]
