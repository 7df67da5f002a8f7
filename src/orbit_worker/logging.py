"""JSON logging setup shared by the app and the Uvicorn server."""

import logging
import sys

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "orbit-worker"

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_RENAMED_FIELDS = {"asctime": "timestamp", "levelname": "level", "name": "logger"}
_SERVER_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


class _TraceContextFilter(logging.Filter):
    """Copies ddtrace-injected ids onto the record, "0" outside a span."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = getattr(record, "dd.trace_id", "0")
        if not hasattr(record, "span_id"):
            record.span_id = getattr(record, "dd.span_id", "0")
        return True


def setup_logging(level: str = "INFO", service_name: str = SERVICE_NAME) -> logging.Logger:
    """
    Routes all worker and server logs to stdout as one JSON object per line.

    Each line has timestamp, level, logger, message, service, trace_id and
    span_id, plus whatever was passed through `extra`. The Uvicorn loggers
    are detached from their own handlers so access logs use the same
    format.

    Returns:
        The root logger.
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(_TraceContextFilter())
    handler.setFormatter(
        jsonlogger.JsonFormatter(
            f"{_LOG_FORMAT} %(trace_id)s %(span_id)s",
            rename_fields=_RENAMED_FIELDS,
            static_fields={"service": service_name},
        )
    )

    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers = [handler]

    for name in _SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.setLevel(log_level)
        server_logger.handlers = [handler]
        server_logger.propagate = False

    return root
