"""Validation and extraction of one-wire probe output."""

from __future__ import annotations

import logging
import re
from typing import Optional

from models.errors import ChecksumMismatchError, ProbeDataError

logger = logging.getLogger(__name__)

_VALIDITY_RE = re.compile(rb"(YES|NO)$", re.MULTILINE)
# Exactly 4 or 5 digits; longer runs are not a match.
_RAW_VALUE_RE = re.compile(rb"t=(\d{4,5})(?!\d)")


def find_validity_marker(data: bytes) -> Optional[str]:
    """Return the first ``YES``/``NO`` token found at a line end, if any."""
    match = _VALIDITY_RE.search(data)
    if match is None:
        return None
    return match.group(1).decode("ascii")


def parse_raw_value(data: bytes) -> Optional[int]:
    """Extract the raw temperature code from probe output.

    Returns ``None`` when there is nothing to record: no validity marker, or a
    ``YES`` marker without a ``t=`` value of 4-5 digits. Raises
    :class:`ChecksumMismatchError` when the probe reports ``NO``.
    """
    marker = find_validity_marker(data)
    if marker == "NO":
        raise ChecksumMismatchError(data)
    if marker != "YES":
        logger.warning("Probe data has no validity marker", extra={"marker": marker})
        return None

    match = _RAW_VALUE_RE.search(data)
    if match is None:
        logger.warning("No temperature value in probe data", extra={"marker": marker})
        return None

    raw_text = match.group(1).decode("ascii")
    try:
        return int(raw_text, 10)
    except ValueError as exc:
        raise ProbeDataError(
            f"raw data cannot be converted into number {raw_text!r}: {exc}"
        ) from exc
