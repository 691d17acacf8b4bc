"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Reading:
    """A raw probe code stamped with the time it was taken.

    ``value`` is the sensor's integer output (degrees Celsius * 1000), never
    the converted display temperature.
    """

    timestamp: int
    value: int

    def to_line(self) -> str:
        # 1611012127,10125
        return f"{self.timestamp},{self.value}\n"
