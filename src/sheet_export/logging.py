from __future__ import annotations

import json
import logging
import sys
import time
from typing import Literal

from sheet_export.config import ExporterSettings

LogFormat = Literal["json", "text"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_JSONScalar = str | int | float | bool | None

# Structured fields the exporter attaches to its log records
_STANDARD_FIELDS: tuple[str, ...] = (
    "sheet_index",
    "rows",
    "columns",
    "file_format",
    "file_path",
    "bytes",
    "chunks",
)


def _get_json_record_value(record: logging.LogRecord, field_name: str) -> _JSONScalar | None:
    """Fetch a record attribute when it is a JSON scalar, else None."""
    raw_value: object = record.__dict__.get(field_name)
    if isinstance(raw_value, (str, int, float, bool)):
        return raw_value
    return None


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logs.

    Produces one JSON object per record with:
    - ISO8601 timestamp (UTC)
    - level, logger, message
    - Optional static fields (service, etc.)
    - Exporter fields and any configured extra fields found on the record
    - Exception info if present
    """

    def __init__(
        self,
        *,
        static_fields: dict[str, str],
        extra_field_names: list[str],
    ) -> None:
        """Initialize JSON formatter.

        Args:
            static_fields: Fields to include in every log record (e.g., service name)
            extra_field_names: Names of extra fields to extract from LogRecord attributes
        """
        super().__init__()
        self._static = static_fields
        self._extra_fields = extra_field_names

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON."""
        payload: dict[str, _JSONScalar] = {
            "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in self._static:
            payload[key] = self._static[key]

        for field_name in (*self._extra_fields, *_STANDARD_FIELDS):
            if field_name in payload:
                continue
            field_value = _get_json_record_value(record, field_name)
            if field_value is None:
                continue
            payload[field_name] = field_value

        if record.exc_info is not None:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload)


class TextFormatter(logging.Formatter):
    """Human-readable text formatter for development/debugging.

    Format: [timestamp] [LEVEL] [logger] [extra_fields] message
    """

    def __init__(self, *, extra_fields: list[str]) -> None:
        """Initialize text formatter.

        Args:
            extra_fields: Names of extra fields to show in output
        """
        super().__init__()
        self._extra_fields = extra_fields

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as human-readable text."""
        timestamp = self.formatTime(record, "%Y-%m-%d %H:%M:%S")
        parts: list[str] = [
            f"[{timestamp}]",
            f"[{record.levelname}]",
            f"[{record.name}]",
        ]

        for field_name in self._extra_fields:
            if hasattr(record, field_name):
                attr_value: _JSONScalar = getattr(record, field_name)
                parts.append(f"{field_name}={attr_value}")

        parts.append(record.getMessage())

        line = " ".join(parts)

        if record.exc_info is not None:
            line = line + "\n" + self.formatException(record.exc_info)

        return line


def _level_to_int(level: LogLevel) -> int:
    """Convert string log level to integer constant."""
    level_map: dict[LogLevel, int] = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return level_map[level]


def setup_logging(
    *,
    level: LogLevel,
    format_mode: LogFormat,
    service_name: str,
    extra_fields: list[str] | None,
) -> logging.Logger:
    """Configure the root logger for an application using sheet_export.

    Clears existing handlers to ensure clean state. The library itself never
    calls this; it only logs through ``get_logger``.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_mode: Output format ("json" for production, "text" for dev)
        service_name: Service name to include in JSON logs
        extra_fields: List of extra field names to extract from records (empty list if None)

    Returns:
        Configured root logger

    Example:
        >>> from sheet_export.logging import setup_logging
        >>> logger = setup_logging(
        ...     level="INFO",
        ...     format_mode="text",
        ...     service_name="report-export",
        ...     extra_fields=["file_format"],
        ... )
        >>> logger.info("Export started")
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(_level_to_int(level))

    extra_field_names = extra_fields if extra_fields is not None else []

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)

    if format_mode == "json":
        handler.setFormatter(
            JsonFormatter(
                static_fields={"service": service_name},
                extra_field_names=extra_field_names,
            )
        )
    else:
        handler.setFormatter(TextFormatter(extra_fields=extra_field_names))

    root.addHandler(handler)

    # openpyxl warns through the warnings module; keep its logger quiet
    logging.getLogger("openpyxl").setLevel(logging.WARNING)

    return root


def setup_exporter_logging(
    settings: ExporterSettings, *, service_name: str = "sheet-export"
) -> logging.Logger:
    """Configure the root logger from exporter settings.

    Uses the settings' ``log_level`` and ``log_format`` and shows the exporter
    fields (sheet_index, rows, file_format, ...) in text output too.
    """
    return setup_logging(
        level=settings["log_level"],
        format_mode=settings["log_format"],
        service_name=service_name,
        extra_fields=list(_STANDARD_FIELDS),
    )


# Expose stdlib logging module for typed test utilities.
stdlib_logging = logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance by name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


__all__ = [
    "JsonFormatter",
    "LogFormat",
    "LogLevel",
    "TextFormatter",
    "get_logger",
    "setup_exporter_logging",
    "setup_logging",
    "stdlib_logging",
]
