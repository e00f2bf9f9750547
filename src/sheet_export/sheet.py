"""Sheet wrapper pairing one worksheet with its write cursor.

Rows can be written one at a time (``write_row``), walking the cursor cell
by cell, or as a whole 2-D array (``write_data``), which hands the block to
the worksheet in one call and stamps the bounding box afterwards. Use one
style per sheet and generation cycle; when mixed, the bounds reflect
whichever path ran last.
"""

from __future__ import annotations

from sheet_export._exceptions import DisconnectedError
from sheet_export._protocols.openpyxl import WorksheetProtocol, _load_rows
from sheet_export.columns import index_to_label, label_range
from sheet_export.cursor import Cursor
from sheet_export.logging import get_logger
from sheet_export.types.common import RowData, RowValues

_logger = get_logger(__name__)


class Sheet:
    """One worksheet of an export plus its cursor and bounding box.

    All write methods return the sheet itself so calls can be chained.
    Once the owning document is disconnected the sheet is invalidated and
    every operation touching the worksheet raises DisconnectedError.
    """

    def __init__(self, worksheet: WorksheetProtocol, index: int = 0) -> None:
        """Initialize sheet.

        Args:
            worksheet: Underlying openpyxl worksheet.
            index: Position of the worksheet in its workbook.
        """
        self._worksheet: WorksheetProtocol | None = worksheet
        self._index = index
        self._cursor = Cursor()
        self._row_open = False

    @property
    def index(self) -> int:
        return self._index

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    @property
    def worksheet(self) -> WorksheetProtocol:
        """Underlying worksheet.

        Raises:
            DisconnectedError: If the document was disconnected.
        """
        if self._worksheet is None:
            raise DisconnectedError(f"access worksheet of sheet {self._index}")
        return self._worksheet

    def get_worksheet(self) -> WorksheetProtocol:
        return self.worksheet

    def is_valid(self) -> bool:
        return self._worksheet is not None

    def invalidate(self) -> None:
        """Drop the worksheet reference after the document is released."""
        self._worksheet = None

    def set_title(self, title: str) -> Sheet:
        self.worksheet.title = title
        return self

    def reset_coordinates(self, reset_max: bool = False) -> Sheet:
        """Move the cursor back to A1, optionally clearing the bounds."""
        self._cursor.reset(reset_bounds=reset_max)
        self._row_open = False
        return self

    def write_row(self, values: RowValues, finalize: bool = True) -> Sheet:
        """Write values left to right starting at the cursor position.

        Args:
            values: Cell values for consecutive columns.
            finalize: Move to column A of the next row afterwards. When False
                the cursor stays on the last written column and the next
                call appends after it on the same row.

        Returns:
            This sheet.

        Raises:
            DisconnectedError: If the document was disconnected.
        """
        ws = self.worksheet
        if self._row_open and len(values) > 0:
            self._cursor.advance_column()

        last = len(values) - 1
        for position, value in enumerate(values):
            ws[self._cursor.coordinate].value = value
            if position != last:
                self._cursor.advance_column()

        if finalize:
            self._cursor.advance_row()
            self._row_open = False
        elif len(values) > 0:
            self._row_open = True
        return self

    def write_data(self, rows: RowData) -> Sheet:
        """Write a whole 2-D array starting at A1 in one worksheet call.

        The bounds are stamped from the array shape: max row is the number
        of rows, max column the label of the longest row. An empty array
        gives max row 0 and the empty column label.

        Args:
            rows: Rows of cell values.

        Returns:
            This sheet.

        Raises:
            DisconnectedError: If the document was disconnected.
        """
        _load_rows(self.worksheet, rows)

        widest = 0
        for row in rows:
            widest = max(widest, len(row))

        self._cursor.set_max_row(len(rows))
        self._cursor.set_max_column(index_to_label(widest))
        _logger.debug(
            "Loaded rows into sheet",
            extra={"sheet_index": self._index, "rows": len(rows), "columns": widest},
        )
        return self

    def get_max_row(self, offset_by_one: bool = True) -> int:
        """Return the highest row of the bounding box.

        Args:
            offset_by_one: Treat the stored value as one past the last used
                row and subtract one. Pass False for the raw value.
        """
        if offset_by_one:
            return self._cursor.max_row - 1
        return self._cursor.max_row

    def get_max_column(self) -> str:
        return self._cursor.max_column

    def get_current_row(self) -> int:
        return self._cursor.current_row

    def get_current_column(self) -> str:
        return self._cursor.current_column

    def get_used_columns(self) -> list[str]:
        """Labels from "A" up to and including the max column."""
        return label_range(self._cursor.max_column)


__all__ = ["Sheet"]
