from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from logging_config import configure_logging
from models.errors import WaterTempError
from services.recorder import build_default_recorder

logger = logging.getLogger(__name__)


class LogLevel(str, Enum):
    """Levels accepted by ``--log-level``."""

    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"
    critical = "CRITICAL"


app = typer.Typer(
    help="Sample a one-wire temperature probe and append the reading to a CSV log.",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)


def format_display(value: float) -> str:
    """Shortest round-trip text for ``value``, without a trailing ``.0``."""
    text = repr(value)
    if text.endswith(".0"):
        return text[:-2]
    return text


@app.command()
def record(
    probe_path: Optional[Path] = typer.Option(
        None,
        "--probe-path",
        dir_okay=False,
        help="Probe data file (defaults to W1_PROBE_DIR/W1_PROBE_FILE).",
    ),
    db_path: Optional[Path] = typer.Option(
        None,
        "--db-path",
        dir_okay=False,
        help="Existing CSV file readings are appended to (defaults to WATER_TEMP_DB_PATH).",
    ),
    log_level: Optional[LogLevel] = typer.Option(
        None,
        "--log-level",
        case_sensitive=False,
        help="Logging level for stderr output (defaults to LOG_LEVEL env or INFO).",
    ),
) -> None:
    """Take one reading, store the raw code and print the converted temperature."""
    configure_logging(log_level.value if log_level is not None else None)
    recorder = build_default_recorder(
        probe_path=str(probe_path) if probe_path is not None else None,
        db_path=str(db_path) if db_path is not None else None,
    )

    try:
        display = recorder.record_once()
    except WaterTempError as exc:
        logger.critical(
            str(exc),
            extra={
                "probe_path": recorder.probe.path,
                "db_path": recorder.reading_log.path,
            },
        )
        raise typer.Exit(code=1) from exc

    if display is None:
        return
    typer.echo(format_display(display))
