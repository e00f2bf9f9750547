"""Protocol definitions for openpyxl library.

Provides type-safe interfaces to openpyxl Workbook, Worksheet, and Cell
classes without importing openpyxl directly.
"""

from __future__ import annotations

from collections.abc import Generator, MutableMapping
from pathlib import Path
from typing import Protocol

from sheet_export.types.common import CellValue, RowData


class CellProtocol(Protocol):
    """Protocol for openpyxl Cell."""

    value: CellValue
    column_letter: str
    coordinate: str


class ColumnDimensionProtocol(Protocol):
    """Protocol for openpyxl ColumnDimension."""

    width: float


class WorksheetProtocol(Protocol):
    """Protocol for openpyxl Worksheet."""

    def cell(self, row: int, column: int, value: CellValue = None) -> CellProtocol:
        """Get or create cell at (row, column)."""
        ...

    def __getitem__(self, key: str) -> CellProtocol:
        """Get cell by coordinate, e.g. "B3"."""
        ...

    def iter_rows(
        self,
        min_row: int | None = None,
        max_row: int | None = None,
        min_col: int | None = None,
        max_col: int | None = None,
        values_only: bool = False,
    ) -> Generator[tuple[CellValue, ...], None, None]:
        """Iterate rows; yields value tuples when values_only is True."""
        ...

    @property
    def column_dimensions(self) -> MutableMapping[str, ColumnDimensionProtocol]:
        """Return column dimensions mapping."""
        ...

    @property
    def max_row(self) -> int:
        """Return maximum row number with data."""
        ...

    @property
    def max_column(self) -> int:
        """Return maximum column number with data."""
        ...

    @property
    def title(self) -> str:
        """Return worksheet title."""
        ...

    @title.setter
    def title(self, value: str) -> None:
        """Set worksheet title."""
        ...


class WorkbookProtocol(Protocol):
    """Protocol for openpyxl Workbook."""

    @property
    def sheetnames(self) -> list[str]:
        """Return list of sheet names."""
        ...

    @property
    def worksheets(self) -> list[WorksheetProtocol]:
        """Return worksheets in workbook order."""
        ...

    def __getitem__(self, name: str) -> WorksheetProtocol:
        """Get worksheet by name."""
        ...

    def create_sheet(self, title: str | None = None) -> WorksheetProtocol:
        """Create a new worksheet at the end of the workbook."""
        ...

    def save(self, filename: str | Path) -> None:
        """Save workbook to file."""
        ...

    def close(self) -> None:
        """Close workbook."""
        ...

    @property
    def active(self) -> WorksheetProtocol:
        """Return active worksheet."""
        ...

    @active.setter
    def active(self, value: WorksheetProtocol) -> None:
        """Set active worksheet."""
        ...


class _LoadWorkbookFn(Protocol):
    """Protocol for openpyxl load_workbook function."""

    def __call__(
        self, filename: Path, read_only: bool = False, data_only: bool = False
    ) -> WorkbookProtocol: ...


class _WorkbookCtor(Protocol):
    """Protocol for openpyxl.Workbook constructor."""

    def __call__(self) -> WorkbookProtocol: ...


def _load_workbook(
    path: Path, read_only: bool = False, data_only: bool = False
) -> WorkbookProtocol:
    """Load workbook with proper typing via Protocol.

    Args:
        path: Path to Excel file.
        read_only: Open in read-only mode.
        data_only: Read cell values only, not formulas.

    Returns:
        WorkbookProtocol for the loaded workbook.
    """
    openpyxl_mod = __import__("openpyxl")
    load_fn: _LoadWorkbookFn = openpyxl_mod.load_workbook
    return load_fn(path, read_only=read_only, data_only=data_only)


def _create_workbook() -> WorkbookProtocol:
    """Create a new openpyxl Workbook with strict typing.

    Returns:
        WorkbookProtocol for the new workbook (holds one default sheet).
    """
    openpyxl_mod = __import__("openpyxl")
    ctor: _WorkbookCtor = openpyxl_mod.Workbook
    return ctor()


def _load_rows(ws: WorksheetProtocol, rows: RowData) -> None:
    """Load a 2-D array into a worksheet starting at A1.

    None values are skipped so they leave existing cells untouched.

    Args:
        ws: Worksheet to write to.
        rows: Rows of cell values, top to bottom.
    """
    # openpyxl has no whole-array load; Worksheet.append only writes below the
    # current max_row, so cells are addressed directly from A1
    for row_idx, row in enumerate(rows, start=1):
        for col_idx, value in enumerate(row, start=1):
            if value is None:
                continue
            ws.cell(row=row_idx, column=col_idx, value=value)


def _sheet_values(ws: WorksheetProtocol) -> list[tuple[CellValue, ...]]:
    """Read all cell values of a worksheet as row tuples.

    Args:
        ws: Worksheet to read.

    Returns:
        One tuple per row from row 1 to max_row; empty list for a blank sheet.
    """
    if ws.max_row == 1 and ws.max_column == 1 and ws["A1"].value is None:
        return []
    return list(ws.iter_rows(values_only=True))


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
