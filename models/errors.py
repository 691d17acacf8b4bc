"""Failures that abort a sampling run."""

from __future__ import annotations


class WaterTempError(Exception):
    """Base class for every fatal error raised while taking a reading."""


class ProbeReadError(WaterTempError):
    """The probe file could not be opened or read."""


class ChecksumMismatchError(WaterTempError):
    """The probe reported ``NO`` for its CRC check."""

    def __init__(self, data: bytes) -> None:
        super().__init__(f"data is not good: {data!r}")
        self.data = data


class ProbeDataError(WaterTempError):
    """The captured temperature text is not an integer."""


class ReadingStoreError(WaterTempError):
    """The reading log could not be opened, written or closed."""
