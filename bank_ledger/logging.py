"""Logging setup for bank-ledger.

Ledger modules log through ``logging.getLogger(__name__)``. State changes
go out at INFO and rejected operations at DEBUG. Log calls that concern a
customer or an account pass ``extra={"personal_number": ..., "account_number": ...}``;
the JSON formatter lifts those attributes into top-level fields.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, TYPE_CHECKING, Any

if TYPE_CHECKING:
    from bank_ledger.config import BankConfig

PACKAGE_LOGGER = "bank_ledger"
STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Record attributes copied into JSON output when a log call sets them
CONTEXT_FIELDS = ("personal_number", "account_number")


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: IO[str] | None = None,
) -> None:
    """Configure logging for bank-ledger.

    Replaces any handlers on the root logger with a single stream handler.

    Parameters
    ----------
    level : str
        Log level name, case-insensitive; unknown names fall back to INFO.
    format_type : str
        ``"standard"`` for pipe-separated text, ``"json"`` for one JSON
        object per line.
    stream : IO[str] | None
        Where to write (default: stdout).
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt=STANDARD_FORMAT, datefmt=DATE_FORMAT)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in root.handlers[:]:
        root.removeHandler(existing)
    root.setLevel(log_level)
    root.addHandler(handler)

    logging.getLogger(PACKAGE_LOGGER).setLevel(log_level)

    # Faker logs locale lookups at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


def configure_logging(config: BankConfig, level: str | None = None) -> None:
    """Apply the logging settings of a :class:`BankConfig`.

    ``level`` overrides ``config.log_level`` (the sample script passes its
    ``--log-level`` flag here).
    """
    setup_logging(level=level or config.log_level, format_type=config.log_format)


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with ledger context fields."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for name in CONTEXT_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                log_data[name] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (usually ``__name__``)."""
    return logging.getLogger(name)
