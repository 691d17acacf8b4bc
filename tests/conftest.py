from __future__ import annotations

from pathlib import Path

import pytest

from datastore.reading_log import build_default_reading_log
from services.recorder import build_default_recorder
from settings import get_settings
from storage.w1_probe import build_default_probe

GOOD_PROBE_DATA = (
    "a2 00 4b 46 7f ff 0e 10 e5 : crc=e5 YES\n"
    "a2 00 4b 46 7f ff 0e 10 e5 t=10125\n"
)
BAD_CRC_PROBE_DATA = (
    "a2 00 4b 46 7f ff 0e 10 e5 : crc=e5 NO\n"
    "a2 00 4b 46 7f ff 0e 10 e5 t=10125\n"
)


@pytest.fixture(autouse=True)
def _clear_factory_caches():
    caches = (get_settings, build_default_probe, build_default_reading_log, build_default_recorder)
    for cache in caches:
        cache.cache_clear()
    yield
    for cache in caches:
        cache.cache_clear()


@pytest.fixture()
def probe_file(tmp_path: Path) -> Path:
    path = tmp_path / "w1_slave"
    path.write_text(GOOD_PROBE_DATA)
    return path


@pytest.fixture()
def db_file(tmp_path: Path) -> Path:
    path = tmp_path / "water.csv"
    path.write_text("")
    return path
