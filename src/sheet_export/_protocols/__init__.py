"""Protocol definitions for external library abstraction.

Internal protocols used to provide type-safe interfaces to openpyxl
without importing it directly at module load time.
"""

from __future__ import annotations

# Openpyxl protocols
from sheet_export._protocols.openpyxl import (
    CellProtocol,
    ColumnDimensionProtocol,
    WorkbookProtocol,
    WorksheetProtocol,
    _create_workbook,
    _load_rows,
    _load_workbook,
    _sheet_values,
)

__all__ = [
    "CellProtocol",
    "ColumnDimensionProtocol",
    "WorkbookProtocol",
    "WorksheetProtocol",
    "_create_workbook",
    "_load_rows",
    "_load_workbook",
    "_sheet_values",
]
