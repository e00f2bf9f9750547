"""Strictly typed spreadsheet export.

This library builds spreadsheet documents row by row or as bulk arrays and
delivers them as files:
- Column label arithmetic (A..Z, AA.., unbounded)
- Per-sheet write cursor with a running bounding box
- Buffered multi-sheet exporter writing Xlsx (via openpyxl) and Csv
- Output sinks for memory, disk and binary streams

No Any, cast, or type: ignore used anywhere.
"""

from __future__ import annotations

# Errors
from sheet_export._exceptions import (
    DisconnectedError,
    InvalidSheetIndexError,
    NotGeneratedError,
    SerializationError,
    SheetExportError,
)

# Columns
from sheet_export.columns import (
    EMPTY_COLUMN,
    compare,
    index_to_label,
    label_range,
    label_to_index,
    next_label,
)

# Config
from sheet_export.config import (
    ExporterSettings,
    load_exporter_settings,
    make_exporter_settings,
)
from sheet_export.cursor import Cursor
from sheet_export.exporter import Exporter

# Formats
from sheet_export.formats import (
    FormatInfo,
    format_info,
    resolve_format,
    supported_formats,
)

# Formatting
from sheet_export.formatting import (
    FormatterFn,
    auto_size_columns,
    chain_formatters,
)

# Logging
from sheet_export.logging import get_logger, setup_exporter_logging, setup_logging

# Output
from sheet_export.output import (
    BufferSink,
    FileSink,
    OutputSink,
    StreamSink,
    TransferMetadata,
    transfer_headers,
)
from sheet_export.sheet import Sheet

# Types
from sheet_export.types.common import CellValue, RowData, RowValues

__all__ = [
    "EMPTY_COLUMN",
    "BufferSink",
    "CellValue",
    "Cursor",
    "DisconnectedError",
    "Exporter",
    "ExporterSettings",
    "FileSink",
    "FormatInfo",
    "FormatterFn",
    "InvalidSheetIndexError",
    "NotGeneratedError",
    "OutputSink",
    "RowData",
    "RowValues",
    "SerializationError",
    "Sheet",
    "SheetExportError",
    "StreamSink",
    "TransferMetadata",
    "auto_size_columns",
    "chain_formatters",
    "compare",
    "format_info",
    "get_logger",
    "index_to_label",
    "label_range",
    "label_to_index",
    "load_exporter_settings",
    "make_exporter_settings",
    "next_label",
    "resolve_format",
    "setup_exporter_logging",
    "setup_logging",
    "supported_formats",
    "transfer_headers",
]
