"""Write position and bounding box of one sheet."""

from __future__ import annotations

from sheet_export.columns import index_to_label, max_label, next_label

_FIRST_COLUMN = index_to_label(1)
_FIRST_ROW = 1


class Cursor:
    """Current write position plus the running bounding box of used cells.

    The position starts at A1. The bounds only grow while rows are written;
    they are reset by ``reset(reset_bounds=True)`` or stamped directly by the
    bulk write path.
    """

    def __init__(self) -> None:
        self._current_column = _FIRST_COLUMN
        self._current_row = _FIRST_ROW
        self._max_column = _FIRST_COLUMN
        self._max_row = _FIRST_ROW

    @property
    def current_column(self) -> str:
        return self._current_column

    @property
    def current_row(self) -> int:
        return self._current_row

    @property
    def max_column(self) -> str:
        return self._max_column

    @property
    def max_row(self) -> int:
        return self._max_row

    @property
    def coordinate(self) -> str:
        """Cell address of the current position, e.g. "C4"."""
        return f"{self._current_column}{self._current_row}"

    def reset(self, reset_bounds: bool = False) -> None:
        """Move back to A1, optionally clearing the bounding box too."""
        self._current_column = _FIRST_COLUMN
        self._current_row = _FIRST_ROW
        if reset_bounds:
            self._max_column = _FIRST_COLUMN
            self._max_row = _FIRST_ROW

    def advance_column(self) -> None:
        self._current_column = next_label(self._current_column)
        self._max_column = max_label(self._max_column, self._current_column)

    def advance_row(self, reset_column: bool = True) -> None:
        """Move one row down; by default also return to column A."""
        self._current_row += 1
        self._max_row = max(self._max_row, self._current_row)
        if reset_column:
            self._current_column = _FIRST_COLUMN

    def set_max_row(self, max_row: int) -> None:
        self._max_row = max_row

    def set_max_column(self, max_column: str) -> None:
        self._max_column = max_column


__all__ = ["Cursor"]
