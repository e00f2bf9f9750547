from __future__ import annotations

from ._utils import LogFormat, LogLevel
from .exporter import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_FILENAME,
    DEFAULT_FORMAT,
    ExporterSettings,
    load_exporter_settings,
    make_exporter_settings,
)

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_FILENAME",
    "DEFAULT_FORMAT",
    "ExporterSettings",
    "LogFormat",
    "LogLevel",
    "load_exporter_settings",
    "make_exporter_settings",
]
