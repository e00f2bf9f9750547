"""Output format names and serializers.

Format names follow the canonical writer identifiers ("Xlsx", "Csv", ...).
A fixed set of legacy aliases ("Excel2007", "CSV", "OOCalc", ...) is mapped
to them first; any other name is taken as already canonical.

Only formats with a registered writer can be saved. The others are known
(for content type and extension) but raise SerializationError on save.
"""

from __future__ import annotations

import csv
from collections.abc import Callable
from datetime import date, datetime
from pathlib import Path
from typing import TypedDict

from sheet_export._exceptions import SerializationError
from sheet_export._protocols.openpyxl import WorkbookProtocol, _sheet_values
from sheet_export.types.common import CellValue

WriterFn = Callable[[WorkbookProtocol, Path], None]

_LEGACY_ALIASES: dict[str, str] = {
    "Excel2007": "Xlsx",
    "Excel5": "Xls",
    "Excel2003XML": "Xml",
    "CSV": "Csv",
    "OOCalc": "Ods",
    "HTML": "Html",
    "PDF": "Pdf",
}


class FormatInfo(TypedDict):
    """Static description of an output format.

    Attributes:
        name: Canonical format name.
        extension: File extension without the dot.
        content_type: MIME type announced to output sinks.
    """

    name: str
    extension: str
    content_type: str


_FORMATS: dict[str, FormatInfo] = {
    "Xlsx": FormatInfo(
        name="Xlsx",
        extension="xlsx",
        content_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ),
    "Xls": FormatInfo(name="Xls", extension="xls", content_type="application/vnd.ms-excel"),
    "Xml": FormatInfo(name="Xml", extension="xml", content_type="application/xml"),
    "Csv": FormatInfo(name="Csv", extension="csv", content_type="text/csv"),
    "Ods": FormatInfo(
        name="Ods",
        extension="ods",
        content_type="application/vnd.oasis.opendocument.spreadsheet",
    ),
    "Html": FormatInfo(name="Html", extension="html", content_type="text/html"),
    "Pdf": FormatInfo(name="Pdf", extension="pdf", content_type="application/pdf"),
}

_FALLBACK_CONTENT_TYPE = "application/octet-stream"


def resolve_format(name: str) -> str:
    """Translate a legacy alias to its canonical format name.

    Args:
        name: Format name as passed by the caller.

    Returns:
        Canonical name; unknown names are returned unchanged.
    """
    return _LEGACY_ALIASES.get(name, name)


def format_info(name: str) -> FormatInfo:
    """Describe a format, accepting legacy aliases.

    Unknown formats get a lower-cased extension and a generic content type.
    """
    canonical = resolve_format(name)
    known = _FORMATS.get(canonical)
    if known is not None:
        return known
    return FormatInfo(
        name=canonical,
        extension=canonical.lower(),
        content_type=_FALLBACK_CONTENT_TYPE,
    )


def _write_xlsx(wb: WorkbookProtocol, path: Path) -> None:
    wb.save(path)


def _csv_text(value: CellValue) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def _write_csv(wb: WorkbookProtocol, path: Path) -> None:
    """Write the first worksheet as comma separated UTF-8 text."""
    rows = _sheet_values(wb.worksheets[0])
    with path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle, delimiter=",", quotechar='"', lineterminator="\n")
        for row in rows:
            writer.writerow([_csv_text(value) for value in row])


_WRITERS: dict[str, WriterFn] = {
    "Xlsx": _write_xlsx,
    "Csv": _write_csv,
}


def supported_formats() -> list[str]:
    """Canonical names of formats that can be saved."""
    return sorted(_WRITERS)


def require_writer(file_format: str, path: Path) -> WriterFn:
    """Look up the writer for a format before anything is written.

    Raises:
        SerializationError: If no writer exists for the format.
    """
    canonical = resolve_format(file_format)
    writer = _WRITERS.get(canonical)
    if writer is None:
        raise SerializationError(str(path), f"No writer for format {canonical!r}")
    return writer


def save_workbook(wb: WorkbookProtocol, path: Path, file_format: str) -> None:
    """Serialize a workbook to path in the requested format.

    Args:
        wb: Workbook to save.
        path: Output file path.
        file_format: Canonical format name or legacy alias.

    Raises:
        SerializationError: If no writer exists for the format or the file
            cannot be written.
    """
    canonical = resolve_format(file_format)
    writer = require_writer(canonical, path)
    try:
        writer(wb, path)
    except OSError as exc:
        raise SerializationError(str(path), f"Failed to write {canonical} file") from exc


__all__ = [
    "FormatInfo",
    "WriterFn",
    "format_info",
    "require_writer",
    "resolve_format",
    "save_workbook",
    "supported_formats",
]
