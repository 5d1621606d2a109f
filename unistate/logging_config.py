"""
Structured logging for unistate stores.

Trace ids:
    Every Store gets a process-unique id ("store-1", "store-2", ...) at
    construction and logs through get_logger(__name__, trace_id=store.id).
    All lines one store emits carry that id, so an application running
    several stores can filter a single store's dispatches, subscribes,
    unsubscribes and subscriber failures:

        {"level": "DEBUG", "message": "Dispatched IncrementAction to 2 subscribers", "trace_id": "store-3"}
        {"level": "ERROR", "message": "Subscriber render failed", "trace_id": "store-3", "exc_info": "..."}

    Lines from outside any store (CLI, metrics) carry trace_id "N/A".

What gets logged:
    DEBUG  dispatch, thunk run, subscriber added/removed
    ERROR  a subscriber callback raised during a notification round
    Reducer errors are never logged by the store; they propagate to the caller.

Environment Variables:
    UNISTATE_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    UNISTATE_LOG_FORMAT: Log format (json, text) - default: json

Library modules only call get_logger(); handlers are configured by the
application. The unistate CLI calls setup_logging(), which writes to stderr so
--json output on stdout stays parseable.
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter


def setup_logging() -> None:
    """
    Configure root logger with structured logging.

    Reads configuration from environment variables:
    - UNISTATE_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
    - UNISTATE_LOG_FORMAT: json, text (default: json)
    """
    log_level = os.getenv("UNISTATE_LOG_LEVEL", "INFO").upper()
    log_format = os.getenv("UNISTATE_LOG_FORMAT", "json").lower()

    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    level = level_map.get(log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stderr keeps CLI stdout clean for --json output
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(TraceIDFilter())

    if log_format == "json":
        formatter: logging.Formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(trace_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [trace_id=%(trace_id)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, trace_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with optional trace_id for correlation.

    Args:
        name: Logger name (typically __name__)
        trace_id: Trace ID for correlating logs (typically the store id)

    Returns:
        LoggerAdapter with trace_id in extra fields

    Example:
        logger = get_logger(__name__, trace_id="store-1")
        logger.info("Subscriber added")
        # Output (JSON): {"timestamp": "...", "level": "INFO", "message": "Subscriber added", "trace_id": "store-1"}
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"trace_id": trace_id or "N/A"})


class TraceIDFilter(logging.Filter):
    """
    Logging filter that adds trace_id to all log records.

    Ensures all logs have a trace_id field, even if not set via LoggerAdapter.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True
