"""Formatting strategies run by the exporter before serialization.

A formatter receives every sheet of the export after the buffered rows are
written, so the bounding boxes are final. The default is to do nothing.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from sheet_export._protocols.openpyxl import _sheet_values
from sheet_export.columns import label_to_index
from sheet_export.sheet import Sheet

FormatterFn = Callable[[Sequence[Sheet]], None]


def no_formatting(sheets: Sequence[Sheet]) -> None:
    """Leave the sheets untouched."""


def _content_widths(sheet: Sheet) -> dict[str, int]:
    """Longest rendered value per used column.

    Reads stored values only, so no empty cells are created outside the
    worksheet's own dimensions.
    """
    columns = sheet.get_used_columns()
    widths = dict.fromkeys(columns, 0)
    for row in _sheet_values(sheet.worksheet):
        for column in columns:
            position = label_to_index(column) - 1
            if position >= len(row):
                break
            value = row[position]
            if value is not None:
                widths[column] = max(widths[column], len(str(value)))
    return widths


def auto_size_columns(
    min_width: int = 8,
    max_width: int = 50,
    padding: int = 2,
) -> FormatterFn:
    """Build a formatter sizing every used column to its content.

    Args:
        min_width: Smallest width applied.
        max_width: Largest width applied.
        padding: Extra characters added to the longest value.

    Returns:
        Formatter function.
    """

    def _format(sheets: Sequence[Sheet]) -> None:
        for sheet in sheets:
            for column, content_width in _content_widths(sheet).items():
                width = min(max(content_width + padding, min_width), max_width)
                sheet.worksheet.column_dimensions[column].width = float(width)

    return _format


def chain_formatters(*formatters: FormatterFn) -> FormatterFn:
    """Combine formatters into one that runs them in order."""

    def _format(sheets: Sequence[Sheet]) -> None:
        for formatter in formatters:
            formatter(sheets)

    return _format


__all__ = [
    "FormatterFn",
    "auto_size_columns",
    "chain_formatters",
    "no_formatting",
]
