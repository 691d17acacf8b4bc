from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from models.errors import ProbeReadError
from settings import get_settings

logger = logging.getLogger(__name__)


class W1Probe:
    """Raw access to a one-wire probe's kernel pseudo-file.

    The file looks like::

        a2 00 4b 46 7f ff 0e 10 e5 : crc=e5 YES
        a2 00 4b 46 7f ff 0e 10 e5 t=10125
    """

    def __init__(self, path: Path, read_size: int = 100) -> None:
        self.path = path
        self.read_size = read_size

    def read_raw(self) -> bytes:
        """Return at most ``read_size`` bytes from the probe file."""
        try:
            handle = self.path.open("rb")
        except OSError as exc:
            raise ProbeReadError(f"could not open {self.path}: {exc}") from exc

        with handle:
            try:
                data = handle.read(self.read_size)
            except OSError as exc:
                raise ProbeReadError(f"could not read file {self.path}: {exc}") from exc

        if not data:
            raise ProbeReadError(f"could not read file {self.path}: no data")

        logger.debug("Read probe data", extra={"probe_path": self.path})
        return data


@lru_cache
def build_default_probe(
    path: Optional[str] = None,
    read_size: Optional[int] = None,
) -> W1Probe:
    settings = get_settings()
    probe_path = settings.probe_path if path is None else Path(path)
    size = settings.read_size if read_size is None else read_size
    return W1Probe(path=probe_path, read_size=size)
