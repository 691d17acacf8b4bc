from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from models.errors import ReadingStoreError
from models.records import Reading
from settings import get_settings

logger = logging.getLogger(__name__)


class ReadingLog:
    """Append-only CSV of raw readings, one ``timestamp,value`` line each.

    The file is never created here: it must already exist with the right
    permissions.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def append(self, reading: Reading) -> None:
        line = reading.to_line()
        try:
            fd = os.open(self.path, os.O_WRONLY | os.O_APPEND)
        except OSError as exc:
            raise ReadingStoreError(f"could not open db file {self.path}: {exc}") from exc

        try:
            with os.fdopen(fd, "a", encoding="ascii") as handle:
                handle.write(line)
        except OSError as exc:
            raise ReadingStoreError(
                f"could not write {line!r} to db {self.path}: {exc}"
            ) from exc

        logger.debug(
            "Stored reading",
            extra={"db_path": self.path, "timestamp": reading.timestamp, "raw_value": reading.value},
        )


@lru_cache
def build_default_reading_log(path: Optional[str] = None) -> ReadingLog:
    settings = get_settings()
    db_path = settings.db_path if path is None else path
    return ReadingLog(path=Path(db_path))
