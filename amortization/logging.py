"""Logging setup for the amortization command line."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

# Context the schedule attaches to its per-period trace records
SCHEDULE_FIELDS = ("payment_number", "due_date", "ending_balance")


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
) -> None:
    """Configure the root logger for an amortization run.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Unknown names
        fall back to INFO.
    format_type : str
        "standard" for pipe-separated lines, "json" for one object per line.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stdout is reserved for the schedule itself
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(log_level)
    stderr_handler.setFormatter(formatter)
    root_logger.addHandler(stderr_handler)

    logging.getLogger("amortization").setLevel(log_level)

    # Faker logs locale loading at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """Render log records as JSON, including any schedule context."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in SCHEDULE_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)
