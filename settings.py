from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

DEFAULT_PROBE_DIR = "/sys/bus/w1/devices/28-000006af39c9"
# Linux's w1-therm driver names the data file this way.
DEFAULT_PROBE_FILE = "w1_slave"
DEFAULT_READ_SIZE = 100
DEFAULT_DB_PATH = "/home/pi/water.csv"

_PROBE_DIR_ENV = "W1_PROBE_DIR"
_PROBE_FILE_ENV = "W1_PROBE_FILE"
_READ_SIZE_ENV = "PROBE_READ_SIZE"
_DB_PATH_ENV = "WATER_TEMP_DB_PATH"
_LOG_LEVEL_ENV = "LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    probe_dir: str
    probe_file: str
    read_size: int
    db_path: str
    log_level: str

    @property
    def probe_path(self) -> Path:
        return Path(self.probe_dir) / self.probe_file


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_read_size(default: int) -> int:
    value = os.getenv(_READ_SIZE_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    level = candidate.upper()
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


@lru_cache
def get_settings() -> Settings:
    return Settings(
        probe_dir=_read_str_env(_PROBE_DIR_ENV, DEFAULT_PROBE_DIR),
        probe_file=_read_str_env(_PROBE_FILE_ENV, DEFAULT_PROBE_FILE),
        read_size=_read_read_size(DEFAULT_READ_SIZE),
        db_path=_read_str_env(_DB_PATH_ENV, DEFAULT_DB_PATH),
        log_level=_read_log_level("INFO"),
    )
