from __future__ import annotations

import atexit
import copy
import logging
import queue
import sys
from datetime import datetime, timezone
from logging.handlers import QueueHandler, QueueListener
from typing import Any, Optional, TextIO

import structlog

from thumbstrip.infrastructure.config.schema import AppConfig

log = structlog.get_logger(__name__)

# Transport libraries log every request at DEBUG/INFO.
_TRANSPORT_LOGGERS = ("httpx", "httpcore")

_listener: Optional[QueueListener] = None
_atexit_registered = False


def _stamp_from_record(_: Any, __: Any, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Timestamp foreign records with their creation time, not format time."""
    record = event_dict.get("_record")
    if isinstance(record, logging.LogRecord):
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        event_dict["timestamp"] = created.isoformat().replace("+00:00", "Z")
    return event_dict


class _LevelRange(logging.Filter):
    """Pass records with ``low <= levelno <= high``."""

    def __init__(self, low: int = logging.NOTSET, high: int = logging.CRITICAL) -> None:
        super().__init__()
        self._low = low
        self._high = high

    def filter(self, record: logging.LogRecord) -> bool:
        return self._low <= record.levelno <= self._high


class _DictMsgQueueHandler(QueueHandler):
    # The stock prepare() flattens record.msg to a string, which loses the
    # structlog event dict ProcessorFormatter needs downstream.
    def prepare(self, record: logging.LogRecord) -> logging.LogRecord:
        return copy.copy(record)


def build_processor_formatter(config: AppConfig) -> structlog.stdlib.ProcessorFormatter:
    renderer: structlog.typing.Processor
    if config.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.contextvars.merge_contextvars,
            _stamp_from_record,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def _stream_handler(
    stream: TextIO, formatter: logging.Formatter, level_range: _LevelRange
) -> logging.Handler:
    handler = logging.StreamHandler(stream=stream)
    handler.setFormatter(formatter)
    handler.addFilter(level_range)
    return handler


def _start_listener(config: AppConfig) -> None:
    """Swap the root handlers for a queue drained by a background listener.

    DEBUG..WARNING go to stdout, ERROR and above to stderr.
    """
    global _listener, _atexit_registered

    shutdown_logging()

    formatter = build_processor_formatter(config)
    records: queue.Queue[logging.LogRecord] = queue.Queue()

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(_DictMsgQueueHandler(records))
    root.setLevel(config.log_level)

    transport_level = logging.DEBUG if config.log_level == "DEBUG" else logging.WARNING
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)

    _listener = QueueListener(
        records,
        _stream_handler(sys.stdout, formatter, _LevelRange(high=logging.WARNING)),
        _stream_handler(sys.stderr, formatter, _LevelRange(low=logging.ERROR)),
        respect_handler_level=True,
    )
    _listener.start()
    if not _atexit_registered:
        atexit.register(shutdown_logging)
        _atexit_registered = True


def configure_logging(config: AppConfig) -> None:
    """Configure structlog on top of stdlib logging for this process."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _start_listener(config)
    log.info("logging_configured", log_format=config.log_format, log_level=config.log_level)


def shutdown_logging() -> None:
    """Flush queued records and stop the background listener."""
    global _listener
    if _listener is None:
        return
    try:
        _listener.stop()
    finally:
        _listener = None
