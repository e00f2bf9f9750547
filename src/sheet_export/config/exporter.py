from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Final, TypedDict

from ._utils import (
    LogFormat,
    LogLevel,
    _optional_env_str,
    _parse_log_format,
    _parse_log_level,
    _parse_positive_int,
    _parse_str,
)

DEFAULT_FORMAT: Final[str] = "Xlsx"
DEFAULT_FILENAME: Final[str] = "export"
DEFAULT_CHUNK_SIZE: Final[int] = 4096


class ExporterSettings(TypedDict):
    temp_path: Path
    default_format: str
    default_filename: str
    chunk_size: int
    log_level: LogLevel
    log_format: LogFormat


def make_exporter_settings(
    temp_path: Path,
    *,
    default_format: str = DEFAULT_FORMAT,
    default_filename: str = DEFAULT_FILENAME,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    log_level: LogLevel = "INFO",
    log_format: LogFormat = "text",
) -> ExporterSettings:
    """Build settings in code, without reading the environment."""
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    return {
        "temp_path": temp_path,
        "default_format": default_format,
        "default_filename": default_filename,
        "chunk_size": chunk_size,
        "log_level": log_level,
        "log_format": log_format,
    }


def load_exporter_settings() -> ExporterSettings:
    temp_env = _optional_env_str("SHEET_EXPORT_TEMP_PATH")
    return {
        "temp_path": Path(temp_env) if temp_env is not None else Path(tempfile.gettempdir()),
        "default_format": _parse_str("SHEET_EXPORT_DEFAULT_FORMAT", DEFAULT_FORMAT),
        "default_filename": _parse_str("SHEET_EXPORT_DEFAULT_FILENAME", DEFAULT_FILENAME),
        "chunk_size": _parse_positive_int("SHEET_EXPORT_CHUNK_SIZE", DEFAULT_CHUNK_SIZE),
        "log_level": _parse_log_level("SHEET_EXPORT_LOG_LEVEL", "INFO"),
        "log_format": _parse_log_format("SHEET_EXPORT_LOG_FORMAT", "text"),
    }


__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_FILENAME",
    "DEFAULT_FORMAT",
    "ExporterSettings",
    "load_exporter_settings",
    "make_exporter_settings",
]
