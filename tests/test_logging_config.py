import logging
import sys

import pytest

import logging_config
from logging_config import ContextualFormatter, configure_logging
from settings import get_settings


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="services.recorder",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Recorded reading",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_appends_known_context() -> None:
    formatter = ContextualFormatter(fmt="%(levelname)s %(message)s")

    line = formatter.format(_record(raw_value=10125, display_value=51.125, unrelated="x"))

    assert line == "INFO Recorded reading | raw_value=10125 display_value=51.125"


def test_formatter_without_context_is_plain() -> None:
    formatter = ContextualFormatter(fmt="%(message)s", extra_keys=["db_path"])

    assert formatter.format(_record(raw_value=10125)) == "Recorded reading"


@pytest.fixture()
def fresh_logging(monkeypatch):
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    monkeypatch.setattr(logging_config, "_configured", False)
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_configure_logging_targets_stderr(fresh_logging, monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    get_settings.cache_clear()

    configure_logging()

    handlers = [h for h in fresh_logging.handlers if isinstance(h.formatter, ContextualFormatter)]
    assert len(handlers) == 1
    assert handlers[0].stream is sys.stderr
    assert fresh_logging.level == logging.INFO
    assert logging_config._configured is True
