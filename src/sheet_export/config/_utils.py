from __future__ import annotations

from typing import Literal

from sheet_export.config import _test_hooks

# Must match sheet_export.logging.LogLevel / LogFormat
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["json", "text"]


class _EnvError(RuntimeError):
    pass


def _optional_env_str(key: str) -> str | None:
    value = _test_hooks.get_env(key)
    if value is None:
        return None
    trimmed = value.strip()
    if trimmed == "":
        return None
    return trimmed


def _parse_str(key: str, default: str) -> str:
    val = _optional_env_str(key)
    return val if val is not None else default


def _parse_positive_int(key: str, default: int) -> int:
    val = _optional_env_str(key)
    if val is None:
        return default
    parsed = int(val)
    if parsed <= 0:
        raise _EnvError(f"Env var {key} must be a positive integer, got {val!r}")
    return parsed


def _parse_log_level(key: str, default: LogLevel) -> LogLevel:
    val = _optional_env_str(key)
    if val is None:
        return default
    upper_val = val.upper()
    if upper_val == "DEBUG":
        return "DEBUG"
    if upper_val == "INFO":
        return "INFO"
    if upper_val == "WARNING":
        return "WARNING"
    if upper_val == "ERROR":
        return "ERROR"
    if upper_val == "CRITICAL":
        return "CRITICAL"
    return default


def _parse_log_format(key: str, default: LogFormat) -> LogFormat:
    val = _optional_env_str(key)
    if val is None:
        return default
    lower_val = val.lower()
    if lower_val == "json":
        return "json"
    if lower_val == "text":
        return "text"
    return default


__all__ = [
    "LogFormat",
    "LogLevel",
    "_EnvError",
    "_optional_env_str",
    "_parse_log_format",
    "_parse_log_level",
    "_parse_positive_int",
    "_parse_str",
]
