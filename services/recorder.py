"""Single-shot sampling run: read, parse, store, convert."""

from __future__ import annotations

import logging
import time
from functools import lru_cache
from typing import Callable, Optional

from datastore.reading_log import ReadingLog, build_default_reading_log
from models.records import Reading
from services.conversion import raw_to_display
from services.parser import parse_raw_value
from storage.w1_probe import W1Probe, build_default_probe

logger = logging.getLogger(__name__)


class RecorderService:
    """Coordinates the probe, the parser and the reading log for one sample."""

    def __init__(
        self,
        probe: W1Probe,
        reading_log: ReadingLog,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.probe = probe
        self.reading_log = reading_log
        self.clock = clock

    def record_once(self) -> Optional[float]:
        """Take one sample and return the display temperature.

        Returns ``None`` when the probe output holds no value to record; in
        that case nothing is appended to the log.
        """
        data = self.probe.read_raw()
        raw_value = parse_raw_value(data)
        if raw_value is None:
            return None

        reading = Reading(timestamp=int(self.clock()), value=raw_value)
        self.reading_log.append(reading)

        display = raw_to_display(raw_value)
        logger.debug(
            "Recorded reading",
            extra={
                "timestamp": reading.timestamp,
                "raw_value": reading.value,
                "display_value": display,
            },
        )
        return display


@lru_cache
def build_default_recorder(
    probe_path: Optional[str] = None,
    db_path: Optional[str] = None,
) -> RecorderService:
    """Factory that wires the recorder from settings plus explicit overrides."""
    probe = build_default_probe(path=probe_path)
    reading_log = build_default_reading_log(path=db_path)
    return RecorderService(probe=probe, reading_log=reading_log)
