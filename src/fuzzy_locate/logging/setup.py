"""Logging configuration for fuzzy-locate.

Records carry the request id of the HTTP request that triggered them and the
``event`` name passed through ``extra``. Per-search DEBUG records from
``fuzzy_locate.core`` can be enabled separately from the rest of the service
with ``FUZZY_LOCATE_SEARCH_LOG_LEVEL``.
"""

import logging
import os
import sys
from contextvars import ContextVar
from typing import Any, Optional

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "fuzzy-locate"
SEARCH_LOGGER = "fuzzy_locate.core"
NO_EVENT = "-"

# Score-like fields are rounded so float noise doesn't leak into logs
SCORE_FIELDS = ("score", "threshold")
SCORE_DIGITS = 6

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestContextFilter(logging.Filter):
    """Attach the current request id and a default event name."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "-"
        if not getattr(record, "event", None):
            record.event = NO_EVENT
        return True


class SearchJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter with short field names and tidied search fields."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        if "levelname" in log_record:
            log_record["level"] = log_record.pop("levelname")
        if "asctime" in log_record:
            log_record["timestamp"] = log_record.pop("asctime")

        log_record["service"] = SERVICE_NAME

        event = getattr(record, "event", NO_EVENT)
        if event == NO_EVENT:
            log_record.pop("event", None)
        else:
            log_record["event"] = event

        for field in SCORE_FIELDS:
            value = log_record.get(field)
            if isinstance(value, float):
                log_record[field] = round(value, SCORE_DIGITS)

        if hasattr(record, "request_id"):
            log_record["request_id"] = record.request_id


def setup_logging(
    level: Optional[str] = None,
    json_format: Optional[bool] = None,
    search_level: Optional[str] = None,
) -> None:
    """Configure application logging.

    Args:
        level: Root log level. Defaults to ``FUZZY_LOCATE_LOG_LEVEL`` or INFO.
        json_format: Emit JSON lines. Defaults to
            ``FUZZY_LOCATE_LOG_FORMAT == 'json'``.
        search_level: Level for the ``fuzzy_locate.core`` loggers. Defaults to
            ``FUZZY_LOCATE_SEARCH_LOG_LEVEL``; unset inherits the root level.
    """
    if level is None:
        level = os.getenv("FUZZY_LOCATE_LOG_LEVEL", "INFO")
    if json_format is None:
        json_format = os.getenv("FUZZY_LOCATE_LOG_FORMAT", "json").lower() == "json"
    if search_level is None:
        search_level = os.getenv("FUZZY_LOCATE_SEARCH_LOG_LEVEL") or None

    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Levels are enforced on loggers so search records can be more verbose
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestContextFilter())

    if json_format:
        formatter = SearchJsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s [%(request_id)s] %(event)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    search_logger = logging.getLogger(SEARCH_LOGGER)
    search_logger.setLevel(search_level.upper() if search_level else logging.NOTSET)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name."""
    return logging.getLogger(name)


def set_request_id(request_id: str) -> None:
    request_id_var.set(request_id)
