"""Spreadsheet export orchestration.

The exporter owns one workbook and its sheets. Rows are buffered per sheet
and written when the file is generated, so every sheet takes the bulk
load path. The buffer is kept, so a later generation reloads every row
written so far. Generation then runs the formatting strategy, activates the
first sheet, serializes the workbook into the temp directory and optionally
disconnects it to free memory. The saved file can be streamed to an output
sink in fixed-size chunks.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from sheet_export._exceptions import (
    DisconnectedError,
    InvalidSheetIndexError,
    NotGeneratedError,
)
from sheet_export._protocols.openpyxl import WorkbookProtocol
from sheet_export.config import ExporterSettings, make_exporter_settings
from sheet_export.formats import format_info, require_writer, resolve_format
from sheet_export.formatting import FormatterFn, no_formatting
from sheet_export.logging import get_logger
from sheet_export.output import OutputSink, TransferMetadata
from sheet_export.sheet import Sheet
from sheet_export.testing import hooks
from sheet_export.types.common import CellValue, RowBuffer, RowValues

_logger = get_logger(__name__)


class Exporter:
    """Build a spreadsheet row by row and deliver it as a file.

    All failures propagate as exceptions - no recovery or fallbacks.

    Example:
        >>> exporter = Exporter(Path("/tmp"))
        >>> exporter.write_row(["Name", "Total"]).write_row(["north", 12])
        >>> path, name = exporter.generate_file("report.xlsx")
    """

    def __init__(
        self,
        settings: ExporterSettings | Path | str,
        *,
        formatter: FormatterFn | None = None,
        sheet_titles: Sequence[str] | None = None,
    ) -> None:
        """Initialize exporter with one default sheet.

        Args:
            settings: Exporter settings, or just the temp directory to save
                generated files in.
            formatter: Strategy run on all sheets before serialization.
            sheet_titles: Titles for the first sheets; the default sheet takes
                the first title and one more sheet is created per extra title.
        """
        if isinstance(settings, (Path, str)):
            settings = make_exporter_settings(Path(settings))
        self._settings = settings
        self._formatter: FormatterFn = formatter if formatter is not None else no_formatting
        self._file: WorkbookProtocol | None = hooks.create_workbook()
        self._sheets: list[Sheet] = []
        self._data: RowBuffer = {}
        self._generated = False
        self._file_name: str | None = None
        self._file_path: Path | None = None
        self._file_format: str | None = None

        for index, worksheet in enumerate(self._file.worksheets):
            self._sheets.append(Sheet(worksheet, index))

        titles = list(sheet_titles) if sheet_titles is not None else []
        for position, title in enumerate(titles):
            if position < len(self._sheets):
                self._sheets[position].set_title(title)
            else:
                self.add_sheet(title)

    def _require_file(self, operation: str) -> WorkbookProtocol:
        if self._file is None:
            raise DisconnectedError(operation)
        return self._file

    def add_sheet(self, title: str | None = None) -> int:
        """Append a worksheet and return its sheet index."""
        wb = self._require_file("add a sheet")
        index = len(self._sheets)
        self._sheets.append(Sheet(wb.create_sheet(title), index))
        return index

    def write_row(self, data: RowValues, sheet_index: int = 0) -> Exporter:
        """Buffer a row for a sheet; it is written when the file is generated.

        Args:
            data: Cell values for consecutive columns.
            sheet_index: Target sheet.

        Returns:
            This exporter.

        Raises:
            InvalidSheetIndexError: If the sheet does not exist.
            DisconnectedError: If the document was disconnected.
        """
        self._require_file("write a row")
        self.get_sheet(sheet_index)
        row: list[CellValue] = list(data)
        self._data.setdefault(sheet_index, []).append(row)
        return self

    def generate_file(
        self,
        filename: str,
        file_format: str | None = None,
        disconnect: bool = True,
    ) -> tuple[Path, str]:
        """Write all buffered rows, format and save the file into the temp path.

        Args:
            filename: Name of the file to create.
            file_format: Canonical format name or legacy alias; defaults to
                the configured format ("Xlsx").
            disconnect: Release the workbook after saving. The sheets are
                invalidated and the exporter can no longer be modified.

        Returns:
            Tuple of (path, filename) of the saved file.

        Raises:
            DisconnectedError: If the document was already disconnected.
            SerializationError: If the format has no writer (checked before the
                sheets are touched) or the file cannot be written.
        """
        wb = self._require_file("generate file")
        fmt = resolve_format(
            file_format if file_format is not None else self._settings["default_format"]
        )

        path = self._settings["temp_path"] / filename
        require_writer(fmt, path)

        # every generation reloads all rows buffered so far
        for sheet_index in sorted(self._data):
            rows = self._data[sheet_index]
            self.get_sheet(sheet_index).write_data(rows)

        self._formatter(self._sheets)
        # open on the first sheet
        wb.active = wb.worksheets[0]

        hooks.save_workbook(wb, path, fmt)

        if disconnect:
            self._disconnect(wb)

        self._file_name = filename
        self._file_path = path
        self._file_format = fmt
        self._generated = True
        _logger.info(
            "Generated file",
            extra={"file_path": str(path), "file_format": fmt},
        )
        return path, filename

    def _disconnect(self, wb: WorkbookProtocol) -> None:
        wb.close()
        self._file = None
        for sheet in self._sheets:
            sheet.invalidate()
        _logger.debug("Disconnected workbook")

    def output_file(
        self,
        sink: OutputSink,
        filename: str | None = None,
        file_format: str | None = None,
        disconnect: bool = True,
    ) -> None:
        """Send the file to a sink, generating it first when needed.

        Args:
            sink: Receiver of the metadata and file chunks.
            filename: Name announced to the sink. Also the file name used
                when generating; defaults to the configured name plus the
                format extension.
            file_format: Format used when generating.
            disconnect: Release the workbook when generating.

        Raises:
            DisconnectedError: If generation is needed after a disconnect.
            SerializationError: If the file cannot be written.
        """
        if not self._generated:
            fmt = file_format if file_format is not None else self._settings["default_format"]
            name = filename
            if not name:
                name = f"{self._settings['default_filename']}.{format_info(fmt)['extension']}"
            self.generate_file(name, fmt, disconnect)

        path = self.file_path
        fmt_name = self._file_format if self._file_format is not None else ""
        metadata = TransferMetadata(
            content_type=format_info(fmt_name)["content_type"],
            filename=filename if filename else self.file_name,
            length=path.stat().st_size,
        )
        sink.start(metadata)

        chunk_size = self._settings["chunk_size"]
        chunks = 0
        with path.open("rb") as handle:
            while True:
                chunk = handle.read(chunk_size)
                if not chunk:
                    break
                sink.write(chunk)
                chunks += 1

        _logger.info(
            "Streamed file",
            extra={"file_path": str(path), "bytes": metadata["length"], "chunks": chunks},
        )

    def get_file(self) -> WorkbookProtocol:
        """Return the underlying workbook.

        Raises:
            DisconnectedError: If the document was disconnected.
        """
        return self._require_file("access the workbook")

    def get_sheets(self) -> list[Sheet]:
        return list(self._sheets)

    def get_sheet(self, sheet_index: int = 0) -> Sheet:
        """Return a sheet by index.

        Raises:
            InvalidSheetIndexError: If the sheet does not exist.
        """
        if sheet_index < 0 or sheet_index >= len(self._sheets):
            raise InvalidSheetIndexError(sheet_index)
        return self._sheets[sheet_index]

    def set_worksheet_title(self, title: str, sheet_index: int = 0) -> Exporter:
        """Set the title of a worksheet, the first one by default.

        Raises:
            InvalidSheetIndexError: If the sheet does not exist.
            DisconnectedError: If the document was disconnected.
        """
        self.get_sheet(sheet_index).set_title(title)
        return self

    def set_generated(self, generated: bool) -> Exporter:
        self._generated = generated
        return self

    def is_generated(self) -> bool:
        return self._generated

    def is_disconnected(self) -> bool:
        return self._file is None

    @property
    def settings(self) -> ExporterSettings:
        return self._settings

    @property
    def temp_path(self) -> Path:
        return self._settings["temp_path"]

    @property
    def file_name(self) -> str:
        if self._file_name is None:
            raise NotGeneratedError("file_name")
        return self._file_name

    @property
    def file_path(self) -> Path:
        if self._file_path is None:
            raise NotGeneratedError("file_path")
        return self._file_path


__all__ = ["Exporter"]
