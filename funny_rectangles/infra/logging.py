"""Application logging setup.

Console output always goes to stderr so stdout stays reserved for generated
rectangles. A JSONL run file is added only when a log directory is configured.
"""

from __future__ import annotations

import logging
import os
import queue
from dataclasses import dataclass
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from funny_rectangles.infra.app_data import resolve_logs_dir
from funny_rectangles.infra.json_codec import dumps_text

_QUEUE_LISTENER: QueueListener | None = None

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RECORD_ATTRIBUTES = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json


class JsonFormatter(logging.Formatter):
    """One JSON object per record; ``extra`` values are kept under ``fields``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = {
            key: value for key, value in vars(record).items() if key not in _RECORD_ATTRIBUTES
        }
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return dumps_text(payload, default=str)


def configure_logging(config: LoggingConfig) -> None:
    """Replace root handlers; a file sink is fed through a background queue listener."""
    global _QUEUE_LISTENER

    shutdown_logging()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))

    console = _handler(logging.StreamHandler(), config.console_format)
    if not config.file_path:
        root.addHandler(console)
        return

    file_path = Path(config.file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    sink = _handler(
        logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True),
        config.file_format,
    )
    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(log_queue, console, sink, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def shutdown_logging() -> None:
    """Stop the queue listener, flushing any records still queued."""
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is None:
        return
    listener, _QUEUE_LISTENER = _QUEUE_LISTENER, None
    root = logging.getLogger()
    for handler in [h for h in root.handlers if isinstance(h, QueueHandler)]:
        root.removeHandler(handler)
    listener.stop()
    for handler in listener.handlers:
        handler.close()


def build_logging_config() -> LoggingConfig:
    """Build logging config from environment."""
    level_name = os.getenv("FUNNY_RECTANGLES_LOG_LEVEL", os.getenv("LOG_LEVEL", "INFO"))
    return LoggingConfig(
        level_name=level_name.strip().upper() or "INFO",
        console_format=os.getenv("LOG_FORMAT", "text").strip().lower(),
        file_path=_run_log_file_path(),
    )


def setup_logging() -> LoggingConfig:
    """Configure application logging from environment and return the applied config."""
    config = build_logging_config()
    configure_logging(config)
    if config.file_path:
        logging.getLogger(__name__).debug("logging_file=%s", config.file_path)
    return config


def _run_log_file_path() -> str | None:
    logs_dir = resolve_logs_dir()
    if logs_dir is None:
        return None
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    return str(logs_dir / f"funny_rectangles_run_{stamp}.jsonl")


def _handler(handler: logging.Handler, kind: str) -> logging.Handler:
    if kind.strip().lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    return handler
